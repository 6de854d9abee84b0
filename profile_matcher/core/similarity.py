"""
Similarity utilities.
All functions here are pure numpy so they can be tested without any vectorizer.
"""
import numpy as np


class LengthMismatchError(ValueError):
    """Vectors built over different vocabularies were compared."""


def cosine_similarity(a, b) -> float:
    """
    Cosine similarity between two 1-D vectors of equal length.
    Returns float in [-1,1]; 0.0 if either vector is all zeros.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 1 or b.ndim != 1:
        raise ValueError("cosine_similarity expects 1-D vectors")
    if a.shape[0] != b.shape[0]:
        raise LengthMismatchError(f"vector lengths differ: {a.shape[0]} != {b.shape[0]}")
    dot = float(np.dot(a, b))
    na = float(np.dot(a, a))
    nb = float(np.dot(b, b))
    if na == 0 or nb == 0:
        return 0.0
    return float(dot / (np.sqrt(na) * np.sqrt(nb)))


def similarity_matrix(rows_a: np.ndarray, rows_b: np.ndarray) -> np.ndarray:
    """
    Given rows_a shape (N, D) and rows_b shape (M, D), returns the NxM matrix
    of cosine similarities, dot / (sqrt(norm_a) * sqrt(norm_b)) per entry as in
    cosine_similarity. All-zero rows score 0.0 against everything.
    Entries can differ from cosine_similarity in the last bits, since the
    matrix product sums in its own order.
    """
    rows_a = np.asarray(rows_a, dtype=float)
    rows_b = np.asarray(rows_b, dtype=float)
    if rows_a.ndim != 2 or rows_b.ndim != 2:
        raise ValueError("similarity_matrix expects 2-D arrays")
    if rows_a.shape[1] != rows_b.shape[1]:
        raise LengthMismatchError(f"vector lengths differ: {rows_a.shape[1]} != {rows_b.shape[1]}")
    dots = rows_a @ rows_b.T
    norms_a = np.sqrt(np.einsum("ij,ij->i", rows_a, rows_a))
    norms_b = np.sqrt(np.einsum("ij,ij->i", rows_b, rows_b))
    denom = np.outer(norms_a, norms_b)
    sims = np.zeros_like(dots)
    np.divide(dots, denom, out=sims, where=denom != 0)
    return sims
