"""
Command-line interface for bindata.
This module provides the CLI commands for generating embedded-asset packages.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from bindata.codegen.codegen import Bindata, BindataConfig
from bindata.errors import BindataError
from bindata.version import __version__ as BINDATA_VERSION

cli = typer.Typer(
	name="bindata",
	help="bindata - embed arbitrary files as importable Python modules",
	no_args_is_help=True,
)


def configure_logging(console: Console, verbose: bool) -> None:
	logger = logging.getLogger("bindata")
	logger.handlers = [RichHandler(console=console, show_path=False)]
	logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@cli.command("generate")
def generate(
	input_dir: Path = typer.Option(
		...,
		"--dir",
		"-d",
		envvar="BINDATA_DIR",
		help="Input directory. Processes all files in the path recursively.",
	),
	output_dir: Path = typer.Option(
		...,
		"--out",
		"-o",
		envvar="BINDATA_OUT",
		help="Package directory receiving the generated modules.",
	),
	package: str | None = typer.Option(
		None,
		"--package",
		"-p",
		envvar="BINDATA_PACKAGE",
		help="Name of the package to generate. Defaults to the output directory name.",
	),
	uncompressed: bool = typer.Option(
		False,
		"--uncompressed",
		"-u",
		envvar="BINDATA_UNCOMPRESSED",
		help="Do not gzip the embedded payloads.",
	),
	zero_copy: bool = typer.Option(
		False,
		"--zero-copy",
		"-m",
		envvar="BINDATA_ZERO_COPY",
		help="Accessors return read-only views of the embedded data instead of copies.",
	),
	jobs: int = typer.Option(
		1, "--jobs", "-j", envvar="BINDATA_JOBS", help="Translation worker threads."
	),
	prune: bool = typer.Option(
		True,
		"--prune/--no-prune",
		help="Remove generated modules whose input file no longer exists.",
	),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging."),
):
	"""Translate every stale file under --dir into a module under --out."""
	console = Console(stderr=True)
	configure_logging(console, verbose)

	config = BindataConfig(
		input_dir=input_dir,
		output_dir=output_dir,
		package=package,
		compress=not uncompressed,
		zero_copy=zero_copy,
		jobs=jobs,
		prune=prune,
	)

	try:
		report = Bindata(config).generate_all()
	except BindataError as exc:
		console.log(f"[e] {exc}")
		raise typer.Exit(1) from None

	if report.translated:
		console.log(
			f"✅ Translated {len(report.translated)} of {report.total} files into {config.output_root}"
		)
	else:
		console.log(f"✅ All {report.total} files up to date")
	if report.pruned:
		console.log(f"🧹 Removed {len(report.pruned)} stale modules")


@cli.command("version")
def version():
	"""Print the bindata version."""
	typer.echo(BINDATA_VERSION)


def main():
	cli()


if __name__ == "__main__":
	main()
