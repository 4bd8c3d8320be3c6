import math
import numpy as np


# This function evaluates the streamwise velocity at height y
def velocity(y):
    if y > 1:
        return (0.2 / 0.41) * math.log(y / 1.0)
    return 0.0


# This function solves the advection equation one grid point at a time
def solve(
    nx,
    ny,
    xmax,
    ymax,
    x0,
    y0,
    sigmax,
    sigmay,
    bvals,
    cfl,
    nsteps,
    vely,
    xmin=0.0,
    ymin=0.0,
):
    dx = (xmax - xmin) / nx
    dy = (ymax - ymin) / ny
    dt = cfl / (abs((0.2 / 0.41) * math.log(ymax / 1.0)) / dx + abs(vely) / dy)

    x = np.zeros(nx + 2)
    y = np.zeros(ny + 2)
    for i in range(0, nx + 2):
        x[i] = (i - 0.5) * dx
    for j in range(0, ny + 2):
        y[j] = (j - 0.5) * dy

    u = np.zeros([nx + 2, ny + 2])
    dudt = np.zeros([nx + 2, ny + 2])
    for i in range(0, nx + 2):
        for j in range(0, ny + 2):
            x2 = (x[i] - x0) * (x[i] - x0)
            y2 = (y[j] - y0) * (y[j] - y0)
            u[i][j] = math.exp(
                -1.0 * ((x2 / (2.0 * sigmax**2)) + (y2 / (2.0 * sigmay**2)))
            )
    u_initial = u.copy()

    bval_left, bval_right, bval_lower, bval_upper = bvals
    for m in range(0, nsteps):
        for j in range(0, ny + 2):
            u[0][j] = bval_left
            u[nx + 1][j] = bval_right
        for i in range(0, nx + 2):
            u[i][0] = bval_lower
            u[i][ny + 1] = bval_upper
        for i in range(1, nx + 1):
            for j in range(1, ny + 1):
                vx = velocity(j * dy)
                dudt[i][j] = -1 * (
                    vx * (u[i][j] - u[i - 1][j]) / dx
                    + vely * (u[i][j] - u[i][j - 1]) / dy
                )
        for i in range(1, nx + 1):
            for j in range(1, ny + 1):
                u[i][j] = u[i][j] + dudt[i][j] * dt

    return x, y, u_initial, u, dt
