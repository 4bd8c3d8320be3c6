import argparse
import os
import matplotlib.pyplot as plt
from finite_difference import plotting
from finite_difference.advection import AdvectionSolver
from finite_difference.config import get_config, problem_configs
from finite_difference.data_management import write_outputs


def run(
    problem: str,
    output_directory: str = ".",
    progress_bar: bool = False,
    plot: bool = False,
    **overrides,
):
    """
    integrate a named problem and write initial.dat, final.dat and average.dat
    returns:
        the finished AdvectionSolver
    """
    config = get_config(problem, **overrides)
    solver = AdvectionSolver(config, progress_bar=progress_bar)
    solver.euler()
    write_outputs(solver, output_directory)
    if plot:
        for name, plot_function in [
            ("heatmap", plotting.heatmap),
            ("average", plotting.average_plot),
            ("extrema", plotting.extrema_plot),
        ]:
            savepath = os.path.join(output_directory, f"{name}.png")
            plt.close(plot_function(solver, show=False, savepath=savepath))
    return solver


if __name__ == "__main__":
    parser = argparse.ArgumentParser(prog="finite_difference")
    parser.add_argument(
        "--problem", default="log_profile", choices=list(problem_configs)
    )
    parser.add_argument("--output-dir", default=".")
    parser.add_argument("--nsteps", type=int, default=None)
    parser.add_argument("--progress-bar", action="store_true")
    parser.add_argument("--plot", action="store_true")
    args = parser.parse_args()

    overrides = {} if args.nsteps is None else dict(nsteps=args.nsteps)
    run(
        args.problem,
        output_directory=args.output_dir,
        progress_bar=args.progress_bar,
        plot=args.plot,
        **overrides,
    )
