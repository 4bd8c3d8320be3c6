import numpy as np
import matplotlib.pyplot as plt
from finite_difference.data_management import vertical_average

colors = {
    "blue": "#1f77b4",
    "orange": "#ff7f0e",
    "green": "#2ca02c",
    "red": "#d62728",
}


def heatmap(solver, show: bool = True, savepath: str = None):
    """
    initial state, final state and their difference side by side
    """
    bounds = [solver.x[0], solver.x[-1], solver.y[0], solver.y[-1]]
    u_initial = solver.initial_field
    u_final = solver.final_field
    hmin = min(np.min(u_initial), np.min(u_final))
    hmax = max(np.max(u_initial), np.max(u_final))

    fig, axs = plt.subplots(1, 3, figsize=(15, 4.5), sharey=True)
    panels = [
        ("t = 0", u_initial, dict(vmin=hmin, vmax=hmax)),
        (f"t = {solver.t0:.3g}", u_final, dict(vmin=hmin, vmax=hmax)),
        ("final - initial", u_final - u_initial, dict(cmap="coolwarm")),
    ]
    for ax, (title, data, kwargs) in zip(axs, panels):
        # u is indexed (x, y), imshow expects (row=y, col=x)
        im = ax.imshow(np.flipud(data.T), extent=bounds, aspect="auto", **kwargs)
        ax.set_title(title)
        ax.set_xlabel("x")
        fig.colorbar(im, ax=ax)
    axs[0].set_ylabel("y")
    fig.tight_layout()
    if savepath is not None:
        plt.savefig(savepath, dpi=300)
    if show:
        plt.show()
    return fig


def average_plot(solver, show: bool = True, savepath: str = None):
    """
    vertically averaged u against x, before and after integration
    """
    ny = solver.config.ny
    fig = plt.figure()
    plt.plot(
        solver.x,
        vertical_average(solver.initial_field, ny),
        color=colors["blue"],
        label="t = 0",
    )
    plt.plot(
        solver.x,
        vertical_average(solver.final_field, ny),
        "--",
        color=colors["orange"],
        label=f"t = {solver.t0:.3g}",
    )
    plt.xlabel("x")
    plt.ylabel("vertical average of u")
    plt.legend()
    if savepath is not None:
        plt.savefig(savepath, dpi=300)
    if show:
        plt.show()
    return fig


def extrema_plot(solver, show: bool = True, savepath: str = None):
    """
    min and max of u after every step
    """
    steps = np.arange(len(solver.min_history))
    fig = plt.figure()
    plt.plot(steps, solver.max_history, color=colors["red"], label="max")
    plt.plot(steps, solver.min_history, color=colors["green"], label="min")
    plt.xlabel("step")
    plt.legend()
    if savepath is not None:
        plt.savefig(savepath, dpi=300)
    if show:
        plt.show()
    return fig
