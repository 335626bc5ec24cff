"""
pkgmatrix — CLI entrypoint.

Usage:
    pkgmatrix --help
    pkgmatrix resolve --distro ubuntu --arch amd64 --os-version 24.04
    pkgmatrix catalogs check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pkgmatrix import __version__
from pkgmatrix.core.config.loader import ConfigError, load_build_config_or_default
from pkgmatrix.core.models.system import Architecture, Board, Distro, Family
from pkgmatrix.core.observability.logging_config import setup_logging

_DISTROS = [d.value for d in Distro]
_FAMILIES = [f.value for f in Family]
_ARCHES = [a.value for a in Architecture if a is not Architecture.ANY] + ["x86_64", "aarch64"]
_BOARDS = [b.value for b in Board]


@click.group()
@click.version_option(version=__version__, prog_name="pkgmatrix")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to build.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """pkgmatrix — resolve OS package sets for image builds."""
    ctx.ensure_object(dict)

    try:
        build = load_build_config_or_default(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    ctx.obj["build"] = build

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PKGMATRIX_LOG_LEVEL", build.log_level)

    setup_logging(
        level=level,
        log_file=os.environ.get("PKGMATRIX_LOG_FILE"),
        log_file_level=os.environ.get("PKGMATRIX_LOG_FILE_LEVEL"),
    )


def _parse_params(raw: tuple[str, ...]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        params[key.strip()] = value
    return params


@cli.command()
@click.option("--distro", "-d", type=click.Choice(_DISTROS), required=True, help="Target distro.")
@click.option(
    "--family", "-f", type=click.Choice(_FAMILIES), default=None,
    help="Distro family (default: from the distro).",
)
@click.option("--arch", "-a", type=click.Choice(_ARCHES), required=True, help="Target architecture.")
@click.option("--os-version", "os_version", required=True, help="Target OS version, e.g. 24.04.")
@click.option(
    "--trusted-boot/--legacy", "trusted_boot", default=None,
    help="Boot mode (default: build.yml, else legacy).",
)
@click.option("--board", "-b", type=click.Choice(_BOARDS), default=None, help="Board model.")
@click.option("--expand/--no-expand", "expand", default=None, help="Expand {{.key}} templates.")
@click.option(
    "--derive-params/--no-derive-params", "derive", default=None,
    help="Seed template params from the target system.",
)
@click.option("--param", "-p", "params", multiple=True, help="Template param key=value (repeatable).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(
    ctx: click.Context,
    distro: str,
    family: str | None,
    arch: str,
    os_version: str,
    trusted_boot: bool | None,
    board: str | None,
    expand: bool | None,
    derive: bool | None,
    params: tuple[str, ...],
    as_json: bool,
) -> None:
    """Resolve the package list for one target system."""
    from pkgmatrix.core.models.system import System, family_for, normalize_arch
    from pkgmatrix.core.services.package_catalog import resolve_packages

    build = ctx.obj["build"]
    target = System(
        distro=Distro(distro),
        family=Family(family) if family else family_for(Distro(distro)),
        arch=normalize_arch(arch),
        version=os_version,
    )
    mode = build.trusted_boot if trusted_boot is None else trusted_boot
    chosen_board = Board(board) if board else build.board
    template_params = {**build.template_params, **_parse_params(params)}

    packages = resolve_packages(
        target,
        trusted_boot=mode,
        board=chosen_board,
        expand_templates=build.expand_templates if expand is None else expand,
        template_params=template_params,
        derive_params=build.derive_template_params if derive is None else derive,
    )

    if as_json:
        click.echo(json.dumps({
            "system": target.model_dump(mode="json"),
            "trusted_boot": mode,
            "board": chosen_board.value,
            "packages": packages,
        }, indent=2))
        return

    for pkg in packages:
        click.echo(pkg)


@cli.group()
def catalogs() -> None:
    """Package catalog commands."""


@catalogs.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def catalogs_check(as_json: bool) -> None:
    """Validate every package catalog."""
    from pkgmatrix.core.services.package_catalog import DEFAULT_CATALOGS, validate_catalog_set

    errors = validate_catalog_set(DEFAULT_CATALOGS)

    if as_json:
        click.echo(json.dumps({"valid": not errors, "errors": errors}, indent=2))
        sys.exit(0 if not errors else 1)

    if not errors:
        click.secho("✅ All catalogs are valid", fg="green", bold=True)
        for name in DEFAULT_CATALOGS.catalogs():
            click.echo(f"   • {name}")
        return

    click.secho("❌ Catalog errors:", fg="red", bold=True)
    for name, errs in sorted(errors.items()):
        for err in errs:
            click.echo(f"   • {err}")
    sys.exit(1)


@catalogs.command("show")
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def catalogs_show(name: str, as_json: bool) -> None:
    """Show the entries of one catalog (or 'common')."""
    from pkgmatrix.core.services.package_catalog import DEFAULT_CATALOGS

    if name == "common":
        data = {"name": "common", "packages": list(DEFAULT_CATALOGS.common)}
        if as_json:
            click.echo(json.dumps(data, indent=2))
        else:
            click.secho("📦 common", fg="cyan", bold=True)
            for pkg in DEFAULT_CATALOGS.common:
                click.echo(f"   {pkg}")
        return

    catalog = DEFAULT_CATALOGS.get(name)
    if catalog is None:
        known = ", ".join(["common", *DEFAULT_CATALOGS.catalogs()])
        click.secho(f"❌ Unknown catalog '{name}' (known: {known})", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(catalog.to_dict(), indent=2))
        return

    click.secho(f"📦 {catalog.name}", fg="cyan", bold=True)
    for entry in catalog.entries():
        click.echo(f"   [{entry.selector.value}/{entry.arch.value}] {entry.key}:")
        for pkg in entry.packages:
            click.echo(f"      {pkg}")


if __name__ == "__main__":
    cli()
