from .backend import KernelBackend
from .numpy_backend import DOMINANCE_MODES, NumPyKernel
from .registry import KERNELS, resolve_kernel

__all__ = ["KernelBackend", "NumPyKernel", "DOMINANCE_MODES", "KERNELS", "resolve_kernel"]
