from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from wordfold.core.model import Sample


DEFAULT_SAMPLES: dict[str, Sample] = {
    # Acceptance examples; keep these stable.
    "natural": Sample(name="natural", expression="NA + NA + NA + BATMAN", expected="NANANABATMAN"),
    "snow": Sample(
        name="snow",
        expression="you know nothing Jon Snow - nothing",
        expected="you know Jon Snow",
    ),
    "herld": Sample(name="herld", expression="hello + world - llowo", expected="herld"),
}


class SampleConfigError(ValueError):
    pass


def load_sample_file(path: str | Path) -> dict[str, Sample]:
    """Load samples from a YAML file.

    Format:
      <name>:
        expression: "hello + world"
        expected: "helloworld"   # optional

    Returns a mapping of sample name -> Sample.
    """
    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SampleConfigError(f"invalid YAML: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SampleConfigError("sample file must be a mapping of name -> {expression, expected}")

    out: dict[str, Sample] = {}
    for k, v in raw.items():
        if not isinstance(k, str) or not k.strip():
            raise SampleConfigError("sample names must be non-empty strings")
        name = k.strip()
        out[name] = _parse_sample(name, v)
    return out


def _parse_sample(name: str, v: Any) -> Sample:
    if not isinstance(v, dict):
        raise SampleConfigError(f"sample '{name}' must be a mapping with an 'expression' key")

    unknown = sorted(str(key) for key in v.keys() if key not in ("expression", "expected"))
    if unknown:
        raise SampleConfigError(f"sample '{name}' has unknown keys: {', '.join(unknown)}")

    expression = v.get("expression")
    if not isinstance(expression, str):
        raise SampleConfigError(f"sample '{name}' expression must be a string")

    expected = v.get("expected")
    if expected is not None and not isinstance(expected, str):
        raise SampleConfigError(f"sample '{name}' expected must be a string")

    return Sample(name=name, expression=expression, expected=expected)


def load_and_merge(sample_file: str | None) -> dict[str, Sample]:
    """Return DEFAULT_SAMPLES merged with the samples of an optional YAML file.

    File samples replace built-ins of the same name, and may add new ones.
    """
    merged = dict(DEFAULT_SAMPLES)
    if sample_file:
        merged.update(load_sample_file(sample_file))
    return merged
