"""Command line entry-point for Argdown semantic analysis."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from .analysis import AnalyzerConfig, ArgdownAnalyzer
from .export import export_result
from .tree import node_from_dict
from .utils.config import ConfigManager
from .utils.logging import setup_logging

logger = logging.getLogger("argdown_analyzer.cli")


@click.command()
@click.option("--input", "-i", type=click.File("r"), default="-", help="JSON parse tree file (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="YAML configuration file")
@click.option("--trace", is_flag=True, help="Include the handler trace in the output")
@click.option("--log-relations", is_flag=True, help="Log every relation of the result")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    input: TextIO,
    output: TextIO,
    config_path: Optional[Path],
    trace: bool,
    log_relations: bool,
    verbose: bool,
) -> None:
    """Build the document model of a parsed Argdown document."""

    manager = ConfigManager(config_path)
    if trace:
        manager.set("trace.enabled", True)
    level = "INFO" if log_relations else manager.get("logging.level")
    setup_logging(level=level, verbose=verbose)

    raw = input.read()
    if not raw.strip():
        raise click.ClickException("No parse tree supplied")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid parse tree JSON: {e}")
    if not isinstance(data, dict):
        raise click.ClickException("Parse tree JSON must be an object")

    try:
        root = node_from_dict(data)
    except ValueError as e:
        raise click.ClickException(str(e))

    config = AnalyzerConfig.from_manager(manager)
    analyzer = ArgdownAnalyzer(config)
    result = analyzer.run(root)

    logger.info(
        f"Analyzed {result.stats.nodes_visited} nodes: {len(result.statements)} statements, "
        f"{len(result.arguments)} arguments, {result.stats.relations} relations "
        f"in {result.stats.elapsed_ms}ms"
    )
    if log_relations:
        result.log_relations()

    exported = export_result(result, include_trace=config.include_trace)
    json.dump(exported.model_dump(by_alias=True), output, indent=2)
    output.write("\n")


if __name__ == "__main__":  # pragma: no cover
    main()
