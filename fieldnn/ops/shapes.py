"""Shape validation shared by the tensor operations.

Every operation validates its declared dimensions against the actual buffer
lengths before producing any output.
"""

from fieldnn.primitives.field import FF, FieldLike, to_field


class ShapeError(ValueError):
    """Declared dimensions do not match the data."""


def as_vector(values: FieldLike, name: str) -> FF:
    """Convert to a 1-D FF array, rejecting scalars and higher ranks."""
    arr = to_field(values)
    if arr.ndim != 1:
        raise ShapeError(f"{name}: expected a 1-D sequence, got {arr.ndim}-D")
    return arr


def check_length(arr: FF, expected: int, name: str) -> None:
    if len(arr) != expected:
        raise ShapeError(f"{name}: expected length {expected}, got {len(arr)}")


def check_positive(value: int, name: str) -> None:
    if value <= 0:
        raise ShapeError(f"{name} must be positive, got {value}")


def check_window(in_size: int, kernel_size: int, name: str) -> None:
    """Kernel must be positive and fit inside the input extent."""
    check_positive(in_size, f"{name} input size")
    check_positive(kernel_size, f"{name} kernel size")
    if kernel_size > in_size:
        raise ShapeError(f"{name}: kernel size {kernel_size} exceeds input size {in_size}")


def conv_output_size(in_size: int, kernel_size: int, stride: int) -> int:
    """Valid (unpadded) convolution output length: (in - k) // stride + 1."""
    return (in_size - kernel_size) // stride + 1


def pool_output_size(in_size: int, kernel_size: int) -> int:
    """Non-overlapping pooling output length. Trailing elements that do not fill a window are dropped."""
    return in_size // kernel_size
