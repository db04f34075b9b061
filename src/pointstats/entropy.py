from typing import Sequence, Union

import torch

from .errors import DimensionMismatchError, EmptyInputError

ByteVector = Union[torch.Tensor, Sequence[int]]


def _as_bytes(data: ByteVector, name: str) -> torch.Tensor:
    values = torch.as_tensor(data).flatten()
    if values.numel() == 0:
        raise EmptyInputError(f"{name} - sample is empty")
    if values.is_floating_point() or torch.any(values < 0) or torch.any(values > 255):
        raise ValueError(f"{name} expects byte values in 0..255")
    return values.long()


def _entropy_of_counts(counts: torch.Tensor, n: int) -> float:
    probabilities = counts[counts > 0].to(torch.float64) / n
    return -(probabilities * torch.log(probabilities)).sum().item()


def entropy(data: ByteVector) -> float:
    """Shannon entropy (natural log) of a byte vector's value frequencies."""
    values = _as_bytes(data, "entropy")
    return _entropy_of_counts(torch.bincount(values, minlength=256), values.numel())


def joint_entropy(data1: ByteVector, data2: ByteVector) -> float:
    """Entropy of the pairs (data1[i], data2[i])."""
    values1 = _as_bytes(data1, "joint_entropy")
    values2 = _as_bytes(data2, "joint_entropy")
    if values1.numel() != values2.numel():
        raise DimensionMismatchError(
            f"joint_entropy - vectors differ in length: {values1.numel()} and {values2.numel()}"
        )
    pairs = values1 * 256 + values2
    return _entropy_of_counts(torch.bincount(pairs, minlength=256 * 256), pairs.numel())


def dependence(data1: ByteVector, data2: ByteVector) -> float:
    """
    Dependence of two byte vectors: (H(x) + H(y)) / H(x, y) - 1.
    0 for independent variables, 1 when each determines the other.
    Two constant vectors carry no information and give 0.
    """
    joint = joint_entropy(data1, data2)
    if joint == 0.0:
        return 0.0
    return (entropy(data1) + entropy(data2)) / joint - 1.0
