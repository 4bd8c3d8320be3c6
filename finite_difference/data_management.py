"""
plain text output of solution snapshots
files are space separated, one row per sample, rows ordered by x index then y
index
"""

import os
import numpy as np

SNAPSHOT_FILENAMES = {
    "initial": "initial.dat",
    "final": "final.dat",
    "average": "average.dat",
}


def write_snapshot(path: str, x: np.ndarray, y: np.ndarray, u: np.ndarray):
    """
    args:
        path:   file to write
        x:      (m,)
        y:      (n,)
        u:      (m, n)
    writes:
        m * n rows of 'x[i] y[j] u[i, j]'
    """
    xx, yy = np.meshgrid(x, y, indexing="ij")
    data = np.column_stack((xx.ravel(), yy.ravel(), u.ravel()))
    np.savetxt(path, data, fmt="%g", delimiter=" ")


def vertical_average(u: np.ndarray, ny: int) -> np.ndarray:
    """
    args:
        u:      (nx + 2, ny + 2), ghost cells included
        ny:     number of interior cells in y
    returns:
        sum over all ny + 2 columns divided by ny (nx + 2,)
    """
    return np.sum(u, axis=1) / ny


def write_vertical_average(path: str, x: np.ndarray, average: np.ndarray):
    """
    writes:
        one row of 'x[i] average[i]' per i
    """
    np.savetxt(path, np.column_stack((x, average)), fmt="%g", delimiter=" ")


def write_outputs(solver, directory: str = ".") -> dict:
    """
    args:
        solver:     AdvectionSolver which has finished integrating
        directory:  output directory, created if missing
    returns:
        {name: path} of the written files
    """
    os.makedirs(directory, exist_ok=True)
    paths = {
        name: os.path.join(directory, filename)
        for name, filename in SNAPSHOT_FILENAMES.items()
    }
    write_snapshot(paths["initial"], solver.x, solver.y, solver.initial_field)
    write_snapshot(paths["final"], solver.x, solver.y, solver.final_field)
    write_vertical_average(
        paths["average"],
        solver.x,
        vertical_average(solver.final_field, solver.config.ny),
    )
    return paths
