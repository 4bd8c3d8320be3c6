from finite_difference.advection import AdvectionSolver
from finite_difference.config import get_config
import finite_difference.plotting as plotting

solver = AdvectionSolver(get_config("small_log_profile"), progress_bar=True)
solver.euler()

plotting.heatmap(solver)
plotting.average_plot(solver)
plotting.extrema_plot(solver)
