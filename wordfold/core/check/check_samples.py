from __future__ import annotations

from typing import Iterable

from wordfold.core.errors import ReduceError
from wordfold.core.model import Sample, SampleResult
from wordfold.core.reduce.reduce_expression import reduce_expression


def check_samples(samples: dict[str, Sample] | Iterable[Sample]) -> list[SampleResult]:
    """Reduce every sample, in name order.

    Reduction errors are captured on the result rather than raised, so one bad
    sample does not hide the others.
    """

    items = samples.values() if isinstance(samples, dict) else samples
    results: list[SampleResult] = []
    for sample in sorted(items, key=lambda s: s.name):
        try:
            actual = reduce_expression(sample.expression)
        except ReduceError as e:
            results.append(SampleResult(sample=sample, actual=None, error=e))
            continue
        results.append(SampleResult(sample=sample, actual=actual))
    return results


def sample_errors(results: list[SampleResult]) -> list[ReduceError]:
    errors: list[ReduceError] = []
    for r in results:
        if r.ok:
            continue
        if r.error is not None:
            errors.append(
                type(r.error)(
                    code=r.error.code,
                    message=r.error.message,
                    expression=r.sample.name,
                    column=r.error.column,
                )
            )
            continue
        errors.append(
            ReduceError(
                code="C_SAMPLE_MISMATCH",
                message=f"expected {r.sample.expected!r}, got {r.actual!r}",
                expression=r.sample.name,
            )
        )
    return errors
