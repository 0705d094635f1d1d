from __future__ import annotations

import json

import typer

from wordfold.core.check.check_samples import check_samples, sample_errors
from wordfold.core.errors import ReduceError
from wordfold.core.model import Sample
from wordfold.core.reduce.reduce_expression import reduce_expression
from wordfold.core.samples.sample_config import SampleConfigError, load_and_merge
from wordfold.core.tokenize.tokenize_expression import tokenize

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _callback() -> None:
    """Wordfold CLI."""
    return


@app.command("reduce")
def reduce_cmd(
    expression: str = typer.Argument(..., help="Expression, e.g. 'hello + world - llowo'"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Reduce a word expression left-to-right (+ appends, - strikes)."""
    _check_format(format)

    def _emit_json(ok: bool, result: str | None, errors: list[ReduceError], exit_code: int) -> None:
        payload = {
            "tool": "wordfold",
            "command": "reduce",
            "expression": expression,
            "ok": ok,
            "result": result,
            "error_count": len(errors),
            "errors": [_to_item(e) for e in errors],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        result = reduce_expression(expression)
    except ReduceError as e:
        if format == "json":
            _emit_json(False, None, [e], 2)
        _print_errors([e])
        raise typer.Exit(code=2)

    if format == "json":
        _emit_json(True, result, [], 0)
    typer.echo(result)


@app.command("tokens")
def tokens_cmd(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Show how an expression is split into words and operators."""
    _check_format(format)

    toks = tokenize(expression)
    if format == "json":
        payload = {
            "tool": "wordfold",
            "command": "tokens",
            "expression": expression,
            "tokens": [{"kind": t.kind.value, "text": t.text, "column": t.column} for t in toks],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    for t in toks:
        typer.echo(f"{t.kind.value.upper()}\t{t.column}\t{t.text}")


@app.command("samples")
def samples_cmd(
    sample_file: str | None = typer.Option(
        None,
        "--sample-file",
        help="Optional YAML file to add/override samples",
    ),
) -> None:
    """List the sample expressions (built-in plus --sample-file)."""
    samples = _load_samples(sample_file)

    typer.echo("Samples:")
    for name in sorted(samples.keys()):
        s = samples[name]
        expected = f" => {s.expected}" if s.expected is not None else ""
        typer.echo(f"- {name}: {s.expression}{expected}")


@app.command("check")
def check_cmd(
    sample_file: str | None = typer.Option(
        None,
        "--sample-file",
        help="Optional YAML file to add/override samples",
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Reduce every sample and compare against its expected result."""
    _check_format(format)

    samples = _load_samples(sample_file)
    results = check_samples(samples)
    errors = sample_errors(results)

    if format == "json":
        payload = {
            "tool": "wordfold",
            "command": "check",
            "ok": not errors,
            "sample_count": len(results),
            "error_count": len(errors),
            "errors": [_to_item(e) for e in errors],
            "results": [
                {
                    "name": r.sample.name,
                    "expression": r.sample.expression,
                    "expected": r.sample.expected,
                    "actual": r.actual,
                    "ok": r.ok,
                }
                for r in results
            ],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=2 if errors else 0)

    for r in results:
        status = "ok" if r.ok else "FAIL"
        outcome = f"!! {r.error.code}" if r.error is not None else f"=> {r.actual}"
        typer.echo(f"{status}: {r.sample.name}: {r.sample.expression} {outcome}")

    if errors:
        _print_errors(errors)
        raise typer.Exit(code=2)
    typer.echo(f"OK: {len(results)} samples passed")


def _load_samples(sample_file: str | None) -> dict[str, Sample]:
    try:
        return load_and_merge(sample_file)
    except FileNotFoundError:
        _print_errors(
            [
                ReduceError(
                    code="E_SAMPLE_FILE_NOT_FOUND",
                    message=f"sample file not found: {sample_file}",
                    expression="sample_file",
                )
            ]
        )
        raise typer.Exit(code=1)
    except SampleConfigError as e:
        _print_errors(
            [
                ReduceError(
                    code="E_SAMPLE_FILE_INVALID",
                    message=str(e),
                    expression="sample_file",
                )
            ]
        )
        raise typer.Exit(code=2)


def _check_format(format: str) -> None:
    if format in ("text", "json"):
        return
    _print_errors(
        [
            ReduceError(
                code="E_UNKNOWN_FORMAT",
                message=f"unknown format: {format} (choose one of: text, json)",
                expression="format",
            )
        ]
    )
    raise typer.Exit(code=2)


def _to_item(e: ReduceError) -> dict:
    return {
        "code": e.code,
        "message": e.message,
        "expression": e.expression,
        "column": e.column,
        "severity": "error",
    }


def _print_errors(errors: list[ReduceError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.expression or "", e.column or 0, e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="wordfold")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
