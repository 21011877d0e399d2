import logging
import typer
from pathlib import Path

from .config import LOG_LEVEL

app = typer.Typer(add_completion=False)

TAG_TABLES = ("dutyholder", "baseline_dutyholder", "rus_dutyholder", "duty_type", "popimar")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rule and variant decisions")
):
    """
    Derive legal-register record fields.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def fields():
    """
    List derived fields.
    """
    from .core.registry import list_fields

    for field in list_fields():
        typer.echo(f"{field.name}\t{field.description}")


@app.command()
def derive(
    field: str = typer.Option(..., help="Derived field name (see `fields`)"),
    records: Path = typer.Option(..., help="YAML or JSON list of records"),
    only: bool = typer.Option(False, help="Print only the derived values, one per line")
):
    """
    Derive one field for every record in a file and print the records as YAML.
    """
    from .core.registry import get_field
    from .utils.records_io import read_records, dump_records

    try:
        derived = get_field(field)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--field")

    loaded, error = read_records(records)
    if loaded is None:
        raise typer.BadParameter(error, param_hint="--records")

    if only:
        for record in loaded:
            typer.echo(derived.deriver(record))
        return

    output = [{**record, field: derived.deriver(record)} for record in loaded]
    typer.echo(dump_records(output), nl=False)


@app.command()
def classify(
    text: str = typer.Argument(..., help="Provision text"),
    table: str = typer.Option("dutyholder", help=f"Tag table: {', '.join(TAG_TABLES)}")
):
    """
    Tag a literal text with one classifier table.
    """
    from .core.rules import tag
    from .core.dutyholder import DUTYHOLDER_RULES, BASELINE_DUTYHOLDER_RULES, RUS_DUTYHOLDER_RULES
    from .core.duty_type import DUTY_TYPE_RULES, POPIMAR_RULES

    tables = {
        "dutyholder": DUTYHOLDER_RULES,
        "baseline_dutyholder": BASELINE_DUTYHOLDER_RULES,
        "rus_dutyholder": RUS_DUTYHOLDER_RULES,
        "duty_type": DUTY_TYPE_RULES,
        "popimar": POPIMAR_RULES,
    }
    if table not in tables:
        raise typer.BadParameter(
            f"Invalid table: {table}. Must be one of: {', '.join(TAG_TABLES)}.",
            param_hint="--table",
        )
    typer.echo(tag(text, tables[table]))


if __name__ == "__main__":
    app()
