# SPDX-License-Identifier: Apache-2.0
"""``hempatlas`` command line: resolve locations, build globe bundles, serve the API."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from hempatlas import __version__
from hempatlas.geo import city_for, country_for, resolve
from hempatlas.globe.style import PRESETS
from hempatlas.utils.cli_helpers import configure_logging_from_env, sanitize_args

LOGGER = logging.getLogger(__name__)


def _apply_verbosity(ns: Any) -> None:
    if getattr(ns, "verbose", False):
        os.environ["HEMPATLAS_VERBOSITY"] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ["HEMPATLAS_VERBOSITY"] = "quiet"
    configure_logging_from_env()


def _add_logging_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose logging for this command"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Quiet logging for this command"
    )


def _cmd_resolve(ns: Any) -> int:
    _apply_verbosity(ns)
    rows = []
    for location in ns.locations:
        coord = resolve(location)
        rows.append(
            {
                "location": location,
                "resolved": coord is not None,
                "lat": coord.lat if coord else None,
                "lng": coord.lng if coord else None,
                "country": country_for(location),
                "city": city_for(location),
            }
        )
    if ns.json:
        sys.stdout.write(json.dumps(rows, indent=2) + "\n")
        return 0
    for row in rows:
        if not row["resolved"]:
            sys.stdout.write(f"{row['location']!r}\tunresolved\n")
            continue
        sys.stdout.write(
            f"{row['location']}\t{row['lat']:.4f}\t{row['lng']:.4f}\t{row['country']}\n"
        )
    return 0


def _cmd_globe(ns: Any) -> int:
    """Build a globe bundle from the current backend data."""

    from hempatlas.session import GlobeSession

    _apply_verbosity(ns)
    session = GlobeSession.from_env()
    if ns.preset:
        session.style_store.apply_preset(ns.preset)
    token = ns.token or os.environ.get("HEMPATLAS_ACCESS_TOKEN")
    if token:
        session.sign_in(token)
    session.set_zoom(ns.zoom)

    options: dict[str, Any] = {"title": ns.title}
    if ns.width is not None:
        options["width"] = ns.width
    if ns.height is not None:
        options["height"] = ns.height
    bundle = session.build_bundle(Path(ns.output), **options)
    LOGGER.info("Plotted %d markers", len(session.markers))
    sys.stdout.write(f"{bundle.index_html}\n")
    return 0


def _cmd_serve(ns: Any) -> int:
    import uvicorn

    _apply_verbosity(ns)
    LOGGER.info("Serving on %s:%s", ns.host, ns.port)
    uvicorn.run(
        "hempatlas.api.server:create_app",
        factory=True,
        host=ns.host,
        port=ns.port,
        reload=ns.reload,
        log_level="debug" if ns.verbose else "info",
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hempatlas",
        description="Hemp Atlas globe: location lookup, bundle builds and API.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    sub = parser.add_subparsers(dest="command", required=True)

    p_resolve = sub.add_parser(
        "resolve",
        help="Resolve location strings to coordinates",
        description="Look up free-text locations in the static city/country tables.",
    )
    p_resolve.add_argument("locations", nargs="+", help="Location strings")
    p_resolve.add_argument("--json", action="store_true", help="Emit JSON")
    _add_logging_flags(p_resolve)
    p_resolve.set_defaults(func=_cmd_resolve)

    p_globe = sub.add_parser(
        "globe",
        help="Build an interactive globe bundle",
        description=(
            "Fetch organizations and products (when a token is given) and write "
            "index.html plus assets into the output directory."
        ),
    )
    p_globe.add_argument("--output", required=True, help="Output directory")
    p_globe.add_argument(
        "--token", help="Access token; unlocks the sign-in gated layers"
    )
    p_globe.add_argument("--zoom", type=float, default=0.0, help="Zoom level")
    p_globe.add_argument(
        "--preset", choices=list(PRESETS), help="Style preset to apply before building"
    )
    p_globe.add_argument("--title", default="Hemp Atlas", help="Page title")
    p_globe.add_argument("--width", type=int)
    p_globe.add_argument("--height", type=int)
    _add_logging_flags(p_globe)
    p_globe.set_defaults(func=_cmd_globe)

    p_serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true")
    _add_logging_flags(p_serve)
    p_serve.set_defaults(func=_cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    ns = build_parser().parse_args(args_list)
    LOGGER.debug("hempatlas %s", " ".join(sanitize_args(args_list)))
    return int(ns.func(ns) or 0)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
