"""Compile command: show or write the AST of files and directories."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from jsdoc_serializer.codegen.generator import Forest
from jsdoc_serializer.codegen.node import Node
from jsdoc_serializer.config import load_config
from jsdoc_serializer.errors import JsDocSerializerError
from jsdoc_serializer.serializer import JsDocSerializer, forest_to_dict

console = Console()


@click.command("compile")
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write JSON to this file")
@click.option("--json", "output_json", is_flag=True, help="Print JSON instead of a tree")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Config file")
@click.option("--attach-todos", is_flag=True, help="Link @todo nodes into the tree")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def compile_command(
    path: Path,
    output: Optional[Path],
    output_json: bool,
    config_path: Optional[Path],
    attach_todos: bool,
    verbose: bool,
) -> None:
    """Compile documentation comments in PATH (a file or a directory).

    Examples:

        jsdoc-serializer compile src/index.js

        jsdoc-serializer compile src --json

        jsdoc-serializer compile src -o build/ast.json
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(config_path)
    if attach_todos:
        config.attach_todos = True
    serializer = JsDocSerializer(config)

    try:
        if path.is_dir():
            results = serializer.compile_from_directory(path)
        else:
            results = serializer.compile_from_file(path)
    except (JsDocSerializerError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if output is not None or output_json:
        data = {name: forest_to_dict(forest) for name, forest in results.items()}
        text = json.dumps(data, indent=config.indent)
        if output is None:
            click.echo(text)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Wrote AST for {len(results)} file(s):[/green] {output}")
        return

    if not any(results.values()):
        console.print("[yellow]No documentation blocks found[/yellow]")
        return

    for name, forest in results.items():
        if forest:
            console.print(_forest_tree(name, forest))


def _forest_tree(name: str, forest: Forest) -> Tree:
    """Build a rich tree with one branch per block."""
    tree_widget = Tree(f"[bold]{escape(name)}[/bold] ({len(forest)} blocks)")
    for index, nodes in enumerate(forest):
        branch = tree_widget.add(f"block {index}")
        for node in nodes:
            if node.is_root:
                _add_node_to_tree(node, branch)
    return tree_widget


def _add_node_to_tree(node: Node, tree_widget: Tree) -> None:
    """Recursively add a node and its children to the tree widget."""
    attributes = node.attributes.to_dict()
    label = f"[cyan]{node.kind.value}[/cyan]"
    if attributes:
        label += f" {escape(json.dumps(attributes))}"
    child_branch = tree_widget.add(label)
    for child in node.children:
        _add_node_to_tree(child, child_branch)
