"""Django management command showing how casefold rewrites a path."""

import json
from dataclasses import dataclass, asdict
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from casefold.domain.exceptions import CasefoldConfigError
from casefold.domain.rewrite import quote_path
from casefold.factories import create_path_rewriter
from casefold.usecases.path_exclusion_matcher import PathExclusionMatcher
from casefold_django.settings import get_casefold_settings


@dataclass
class CheckResult:
    """Rewrite decision for one path."""

    path: str
    mode: str
    root: str | None
    excluded: bool
    rewritten: bool
    result: str
    header: str | None = None


class Command(BaseCommand):
    """Report how the configured casefold middleware treats request paths."""

    help = "Show the path casefold would route each given request path to"

    def add_arguments(self, parser: Any) -> None:
        """Add command-line arguments."""
        parser.add_argument(
            "paths",
            nargs="+",
            metavar="path",
            help="Request path(s) to check, e.g. /Scripts/myscript.bat",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            dest="format",
            help="Output format: text (default) or json",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Decide each path under the current CASEFOLD settings.

        Raises:
            CommandError: If CASEFOLD settings are invalid
        """
        output_format = options.get("format", "text")
        verbosity = options.get("verbosity", 1)

        try:
            casefold_settings = get_casefold_settings(getattr(settings, "CASEFOLD", {}))
        except CasefoldConfigError as e:
            raise CommandError(f"Invalid CASEFOLD settings: {e}") from e

        rewriter = create_path_rewriter(casefold_settings)
        matcher = PathExclusionMatcher.from_settings(casefold_settings)

        results: list[CheckResult] = []
        for path in options["paths"]:
            outcome = rewriter.decide(path)
            results.append(
                CheckResult(
                    path=path,
                    mode=casefold_settings.mode.value,
                    root=casefold_settings.root,
                    excluded=matcher.is_excluded(path),
                    rewritten=outcome.rewritten,
                    result=outcome.path,
                    header=quote_path(path) if outcome.emit_original_header else None,
                )
            )

        if output_format == "json":
            self.stdout.write(json.dumps([asdict(r) for r in results], indent=2))
            return

        if verbosity >= 2:
            self.stdout.write(
                f"Mode: {casefold_settings.mode.value}, "
                f"Root: {casefold_settings.root or '-'}, "
                f"Exclude: {', '.join(casefold_settings.exclude) or '-'}"
            )

        for r in results:
            if r.rewritten:
                self.stdout.write(
                    self.style.SUCCESS(f"{r.path} -> {r.result}")
                    + f" ({casefold_settings.header_name}: {r.header})"
                )
            elif r.excluded:
                self.stdout.write(f"{r.path} (excluded, unchanged)")
            else:
                self.stdout.write(f"{r.path} (unchanged)")
