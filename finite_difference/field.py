import numpy as np


class ScalarField:
    """
    owns the state u and its time derivative dudt as flat contiguous buffers of
    shape (nx + 2, ny + 2), ghost cells in the first and last row and column
    args:
        nx:     number of interior cells in x
        ny:     number of interior cells in y
    """

    def __init__(self, nx: int, ny: int):
        self.shape = (nx + 2, ny + 2)
        self.nx = nx
        self.ny = ny
        size = self.shape[0] * self.shape[1]
        self._u = np.zeros(size, dtype="double")
        self._dudt = np.zeros(size, dtype="double")

    @property
    def u(self) -> np.ndarray:
        """
        2d view of the state buffer (nx + 2, ny + 2)
        """
        return self._u.reshape(self.shape)

    @property
    def dudt(self) -> np.ndarray:
        """
        2d view of the derivative buffer (nx + 2, ny + 2)
        """
        return self._dudt.reshape(self.shape)

    def index(self, i: int, j: int) -> int:
        """
        args:
            i:  x index in [0, nx + 1]
            j:  y index in [0, ny + 1]
        returns:
            offset of (i, j) in the flat buffers
        """
        if not (0 <= i < self.shape[0] and 0 <= j < self.shape[1]):
            raise IndexError(f"({i}, {j}) out of bounds for shape {self.shape}")
        return i * self.shape[1] + j

    def __getitem__(self, ij: tuple) -> float:
        return self._u[self.index(*ij)]

    def __setitem__(self, ij: tuple, value: float):
        self._u[self.index(*ij)] = value

    def interior(self, arr: np.ndarray = None) -> np.ndarray:
        """
        view of arr (default u) without ghost cells (nx, ny)
        """
        arr = self.u if arr is None else arr
        return arr[1:-1, 1:-1]

    def snapshot(self) -> np.ndarray:
        return self.u.copy()

    def freeze(self):
        """
        make both buffers read-only
        """
        self._u.flags.writeable = False
        self._dudt.flags.writeable = False

    @property
    def frozen(self) -> bool:
        return not self._u.flags.writeable
