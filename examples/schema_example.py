#!/usr/bin/env python3
"""
Schema Descriptor Example

Walks through the life of a TupleDesc:
- Building named and anonymous schemas
- Looking fields up by position and by name
- Merging two schemas the way a join does
- Width-only equality and why descriptors are not hashable
- The errors raised for bad lookups

Run with: python examples/schema_example.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from tupledesc import (
    BOOLEAN_TYPE,
    DOUBLE_TYPE,
    FLOAT_TYPE,
    INT_TYPE,
    STRING_TYPE,
    NoSuchFieldError,
    TupleDesc,
    TypeKind,
    FieldType,
    string_type,
)


console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    if subtitle:
        full_title = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
    else:
        full_title = f"[bold blue]{title}[/bold blue]"

    console.print(Panel(
        full_title,
        style="bright_blue",
        box=box.DOUBLE,
        padding=(1, 2)
    ))


def print_step(step_num: int, title: str, description: str = ""):
    """Print a step header"""
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str):
    console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


def print_error(message: str):
    console.print(f"[bold red]✗[/bold red] {message}")


def create_field_type_table():
    """Create a table showing all supported field types"""
    table = Table(title="Supported Field Types", box=box.ROUNDED)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Size (bytes)", style="green", justify="right")

    for field_type in (INT_TYPE, BOOLEAN_TYPE, FLOAT_TYPE, DOUBLE_TYPE,
                       STRING_TYPE, string_type(20)):
        table.add_row(str(field_type), str(field_type.get_length()))

    return table


def create_schema_table(title: str, td: TupleDesc):
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Type", style="magenta")
    table.add_column("Declared width", style="yellow", justify="right")

    for i, entry in enumerate(td):
        table.add_row(
            str(i),
            entry.field_name if entry.field_name is not None else "[dim]<anonymous>[/dim]",
            str(entry.field_type),
            f"{entry.field_type.get_length()} bytes"
        )

    return table


def demonstrate_construction():
    print_step(1, "Creating Schemas",
               "A TupleDesc is the ordered list of column types and names")

    console.print(create_field_type_table())
    console.print()

    people = TupleDesc([INT_TYPE, INT_TYPE], ["id", "age"])
    notes = TupleDesc.anonymous([string_type(20)])

    console.print(create_schema_table("people", people))
    console.print(create_schema_table("notes", notes))
    console.print(f"people.get_size() = {people.get_size()} bytes "
                  f"(declared {people.declared_size()} bytes)")
    console.print(f"notes.get_size() = {notes.get_size()} bytes "
                  f"(declared {notes.declared_size()} bytes)")
    print_success("Schemas created")
    console.print()

    return people, notes


def demonstrate_lookup(people: TupleDesc):
    print_step(2, "Looking Up Fields",
               "Positions are checked and names match exactly")

    print_info(f"people.name_to_index('age') = {people.name_to_index('age')}")
    print_info(f"people.get_field_type(0) = {people.get_field_type(0)}")

    for bad in (lambda: people.get_field_name(2),
                lambda: people.get_field_type(-1),
                lambda: people.name_to_index("Age")):
        try:
            bad()
        except NoSuchFieldError as e:
            print_error(f"NoSuchFieldError: {e}")
    console.print()


def demonstrate_merge(people: TupleDesc, notes: TupleDesc):
    print_step(3, "Merging Schemas",
               "A join's output schema is the left schema followed by the right")

    joined = TupleDesc.merge(people, notes)
    console.print(create_schema_table("people ⋈ notes", joined))
    console.print(f"Schema: {joined}")
    console.print(f"Size: {joined.get_size()} bytes")
    print_success("Merged schema built without touching either input")
    console.print()

    return joined


def demonstrate_equality():
    print_step(4, "Comparing Schemas",
               "Equality looks at field count and field widths only")

    ints = TupleDesc([INT_TYPE, INT_TYPE], ["a", "b"])
    floats = TupleDesc([FLOAT_TYPE, FieldType(TypeKind.STRING, 0)])
    doubles = TupleDesc([DOUBLE_TYPE, INT_TYPE])

    console.print(f"{ints} == {floats}: {ints == floats}")
    console.print(f"{ints} == {doubles}: {ints == doubles}")
    console.print(f"{ints} == 'ints': {ints == 'ints'}")

    try:
        {ints: "catalog entry"}
    except TypeError as e:
        print_error(f"TupleDesc is not hashable: {e}")
    console.print()


def main():
    print_header("tupledesc: Schema Descriptors",
                 "Building, inspecting and combining tuple schemas")

    people, notes = demonstrate_construction()
    demonstrate_lookup(people)
    demonstrate_merge(people, notes)
    demonstrate_equality()

    console.print(Panel(
        "[bold green]Done.[/bold green]",
        style="bright_green",
        box=box.DOUBLE,
        title="Summary",
        padding=(1, 2)
    ))


if __name__ == "__main__":
    main()
