from wordfold.core.check.check_samples import check_samples, sample_errors
from wordfold.core.errors import OperandNotFound
from wordfold.core.model import Sample
from wordfold.core.samples.sample_config import DEFAULT_SAMPLES


def test_defaults_all_pass():
    results = check_samples(DEFAULT_SAMPLES)
    assert [r.sample.name for r in results] == ["herld", "natural", "snow"]
    assert all(r.ok for r in results)
    assert sample_errors(results) == []


def test_mismatch_and_failure_are_reported():
    results = check_samples(
        [
            Sample(name="b-mismatch", expression="a + b", expected="a b"),
            Sample(name="a-broken", expression="abc - xyz"),
            Sample(name="c-unchecked", expression="a + b"),
        ]
    )
    assert [r.sample.name for r in results] == ["a-broken", "b-mismatch", "c-unchecked"]
    assert [r.ok for r in results] == [False, False, True]
    assert results[0].actual is None

    errors = sample_errors(results)
    assert [e.code for e in errors] == ["E_OPERAND_NOT_FOUND", "C_SAMPLE_MISMATCH"]
    assert isinstance(errors[0], OperandNotFound)
    assert errors[0].expression == "a-broken"
    assert "'ab'" in errors[1].message
