import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

torch = pytest.importorskip("torch")

from streamstats import Max, Mean, Quantile, Sum, Variance
from streamstats.tensors import accept_tensor, reduce_chunks, to_float_list


def test_to_float_list_flattens_row_major() -> None:
    tensor = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float32)
    assert to_float_list(tensor) == [1.0, 2.0, 3.0, 4.0]
    assert to_float_list(torch.zeros(0)) == []


def test_to_float_list_rejects_non_tensors() -> None:
    with pytest.raises(TypeError):
        to_float_list([1.0, 2.0])


def test_accept_tensor_matches_python_values() -> None:
    tensor = torch.tensor([4.0, 7.0, 13.0, 16.0], dtype=torch.float64)
    stat = accept_tensor(Variance.create(), tensor)
    assert stat.as_double() == pytest.approx(30.0)
    assert accept_tensor(Max.create(), tensor.reshape(2, 2)).as_double() == 16.0


def test_accept_tensor_keeps_non_finite_values() -> None:
    tensor = torch.tensor([1.0, float("nan"), 2.0])
    assert math.isnan(accept_tensor(Sum.create(), tensor).as_double())
    assert math.isnan(accept_tensor(Max.create(), tensor).as_double())


@pytest.mark.parametrize("chunks", [1, 3, 7, 64])
def test_reduce_chunks_matches_single_pass(chunks: int) -> None:
    generator = torch.Generator().manual_seed(0)
    tensor = torch.randn(257, generator=generator, dtype=torch.float64) * 5 + 2
    values = to_float_list(tensor)

    merged = reduce_chunks(Variance.create, tensor, chunks)
    assert merged.n == 257
    assert merged.as_double() == pytest.approx(Variance.of(*values).as_double(), rel=1e-10)
    mean = reduce_chunks(Mean.create, tensor, chunks)
    assert mean.as_double() == pytest.approx(Mean.of(*values).as_double(), rel=1e-10)


def test_reduce_chunks_edge_cases() -> None:
    assert math.isnan(reduce_chunks(Variance.create, torch.zeros(0), 4).as_double())
    with pytest.raises(ValueError):
        reduce_chunks(Sum.create, torch.ones(3), 0)


def test_quantile_probabilities_from_a_tensor() -> None:
    values = [10.0, 20.0, 30.0, 40.0]
    probabilities = torch.tensor([0.0, 1.0], dtype=torch.float64)
    assert Quantile.with_defaults().evaluate(values, probabilities) == [10.0, 40.0]
