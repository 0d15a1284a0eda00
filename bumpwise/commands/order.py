"""Order command implementation for bumpwise.

Runs :class:`~bumpwise.core.VersionPromoter` over versions given on the
command line and shows the sequence a resolver would receive, plus the
order a tail-first resolver would try it in.

Typical usage::

    # Which rack version would a minor update try first?
    $ bumpwise order rack 2.0.9 2.1.0 2.1.4 2.2.0 3.0.0 --locked 2.1.0 --level minor

    # Strict patch update, machine-readable
    $ bumpwise order rack 2.1.0 2.1.4 2.2.0 --locked 2.1.0 --level patch --strict --format json

    # Attach requirements to a candidate for resolver tracing
    $ bumpwise order rails 7.0.0 7.1.0 --dep "7.1.0:rack>=2.2" --debug-resolver
"""

from __future__ import annotations

import sys
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import click
from rich.markup import escape

from bumpwise.core import VersionPromoter, iter_preferred
from bumpwise.exceptions import BumpwiseError
from bumpwise.context import pass_context, BumpwiseContext
from bumpwise.models import CandidateGroup, Version, normalize_name
from bumpwise.utils import (
    classify_bump,
    colorize_bump,
    get_logger,
    setup_logging,
    print_error,
    print_json,
    print_table,
    print_warning,
)

logger = get_logger("commands.order")


@click.command()
@click.argument("name")
@click.argument("versions", nargs=-1)
@click.option(
    "--locked",
    "-l",
    metavar="VERSION",
    help="Version of NAME currently in the lock file.",
)
@click.option(
    "--level",
    type=click.Choice(["major", "minor", "patch"], case_sensitive=False),
    default=None,
    help="Bump level to prefer (default: from config, else major).",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Drop candidates outside the bump level.",
)
@click.option(
    "--unlock",
    "-u",
    multiple=True,
    metavar="NAME",
    help="Package being updated (repeatable). Omit to unlock everything.",
)
@click.option(
    "--dep",
    "deps",
    multiple=True,
    metavar="VERSION:REQ[,REQ...]",
    help="Requirements declared by one candidate version (repeatable).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--debug-resolver",
    is_flag=True,
    default=False,
    help="Log before/after snapshots of the ordering.",
)
@pass_context
def order(
    ctx: BumpwiseContext,
    name: str,
    versions: Tuple[str, ...],
    locked: Optional[str],
    level: Optional[str],
    strict: Optional[bool],
    unlock: Tuple[str, ...],
    deps: Tuple[str, ...],
    output_format: str,
    debug_resolver: bool,
) -> None:
    """Order candidate VERSIONS of package NAME for resolution.

    The resulting sequence is most-preferred-last: a resolver tries the
    final entry first. Options left unset fall back to the loaded
    configuration.

    Exits:
        0 on success, 1 on invalid input or when strict filtering leaves
        no candidates.
    """
    options = ctx.config.promoter_options()
    if level is not None:
        options["level"] = level
    if strict is not None:
        options["strict"] = strict
    if debug_resolver:
        options["debug"] = True
    if options["debug"] and ctx.verbose < 2:
        # Trace snapshots are logged at DEBUG.
        setup_logging(level=logging.DEBUG)

    try:
        groups = _build_groups(name, versions, deps)
        locked_map = {name: locked} if locked else {}
        promoter = VersionPromoter(locked_map, unlock, **options)
        ordered = promoter.order_candidates(name, groups)
    except BumpwiseError as e:
        print_error(f"{e}")
        sys.exit(1)

    locked_version = promoter.locked_specs.version_for(name)
    rows = _build_rows(ordered, locked_version)

    if output_format == "json":
        print_json(
            {
                "dependency": normalize_name(name),
                "level": promoter.level.value,
                "strict": promoter.strict,
                "locked": str(locked_version) if locked_version else None,
                "ordered": [str(group.version) for group in ordered],
                "try_order": [str(group.version) for group in iter_preferred(ordered)],
                "candidates": rows,
            }
        )
    else:
        _display_table(rows, name, promoter)

    if groups and not ordered:
        print_warning(
            f"No candidate of {name} is within {promoter.level.value} "
            f"of {locked_version}"
        )
        sys.exit(1)


def _build_groups(
    name: str,
    versions: Sequence[str],
    deps: Sequence[str],
) -> List[CandidateGroup]:
    """Turn command-line versions and ``--dep`` entries into groups.

    Raises:
        BumpwiseError: A ``--dep`` entry is malformed or names an unknown
            version.
    """
    requirements: Dict[Version, List[str]] = {}
    for entry in deps:
        version_text, sep, reqs = entry.partition(":")
        if not sep or not reqs.strip():
            raise BumpwiseError(
                f"Invalid --dep value {entry!r}; expected VERSION:REQ[,REQ...]"
            )
        requirements.setdefault(Version.parse(version_text), []).extend(
            req.strip() for req in reqs.split(",") if req.strip()
        )

    groups = [
        CandidateGroup.create(
            name,
            raw,
            dependencies=requirements.pop(Version.parse(raw), ()),
        )
        for raw in versions
    ]

    if requirements:
        unknown = ", ".join(str(v) for v in requirements)
        raise BumpwiseError(f"--dep given for versions not listed: {unknown}")

    logger.debug("Built %d candidate group(s) for %s", len(groups), name)
    return groups


def _build_rows(
    ordered: Sequence[CandidateGroup],
    locked_version: Optional[Version],
) -> List[Dict[str, Any]]:
    """One display row per ordered candidate."""
    total = len(ordered)
    rows: List[Dict[str, Any]] = []
    for position, group in enumerate(ordered, start=1):
        rows.append(
            {
                "position": position,
                "version": str(group.version),
                "bump": classify_bump(locked_version, group.version),
                "locked": locked_version is not None and group.version == locked_version,
                "try": total - position + 1,
                "dependencies": list(group.dependencies),
            }
        )
    return rows


def _display_table(
    rows: List[Dict[str, Any]],
    name: str,
    promoter: VersionPromoter,
) -> None:
    if not rows:
        print_warning(f"No candidates for {name}")
        return

    display = [
        {
            "#": row["position"],
            "Version": row["version"],
            "Bump": colorize_bump(row["bump"]),
            "Locked": "yes" if row["locked"] else "",
            "Try": row["try"],
            "Requires": escape(", ".join(row["dependencies"])) or "[dim]-[/dim]",
        }
        for row in rows
    ]
    mode = "strict" if promoter.strict else "loose"
    print_table(
        display,
        title=f"{escape(name)} candidates ({promoter.level.value}, {mode})",
        caption="Try: attempt order of a tail-first resolver (1 = first)",
        column_styles={
            "#": {"justify": "right", "style": "dim"},
            "Version": {"style": "bold", "no_wrap": True},
            "Try": {"justify": "right"},
        },
        row_styler=lambda row: "highlight" if row["Try"] == 1 else None,
    )
