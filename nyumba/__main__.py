"""Nyumba command-line entry-point.

Usage:
    python -m nyumba browse [--search T] [--price B] [--bedrooms B] [--type T]
                            [--sort K] [--view grid|list] [--save ID ...]
    python -m nyumba show ID
    python -m nyumba add --title T --location L --price P --type T
                         --bedrooms B --bathrooms B --description D
                         [--amenity A ...] [--landlord NAME]
    python -m nyumba signin (--email E --password P | --demo ROLE)
    python -m nyumba signup --name N --email E --password P --role ROLE [--phone P]

``configure_logging()`` runs before anything else so every module logs
through the configured handler.  Each invocation runs inside its own
``session_scope`` so log lines can be correlated.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from uuid import uuid4

from pydantic import ValidationError

from nyumba.auth.forms import SignInForm, SignUpForm
from nyumba.auth.service import AuthController, AuthResult, DemoAuthBackend
from nyumba.auth.session import SessionStore
from nyumba.catalog.forms import AddPropertyForm
from nyumba.catalog.store import PropertyCatalog, load_catalog
from nyumba.core import configure_logging, session_scope
from nyumba.core.exceptions import CatalogError, ConfigError
from nyumba.core.settings import Settings
from nyumba.views.formatter import format_card, format_detail, format_results_header, format_row
from nyumba.views.state import ListingsViewState, ViewMode

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nyumba",
        description="Browse rental listings, add a listing, and try the sign-in flow.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Override LOG_LEVEL env var (DEBUG|INFO|WARNING|ERROR).",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        metavar="FORMAT",
        help="Override LOG_FORMAT env var (text|json).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    browse = sub.add_parser("browse", help="Filter, sort and list properties.")
    browse.add_argument("--search", default=None, help="Match title, location or description.")
    browse.add_argument(
        "--price",
        default=None,
        metavar="BUCKET",
        help="all | under-2000 | 2000-3000 | 3000-4000 | over-4000",
    )
    browse.add_argument(
        "--bedrooms",
        default=None,
        metavar="BUCKET",
        help="all | studio | 1 | 2 | 3 | 4-plus",
    )
    browse.add_argument(
        "--type",
        dest="property_type",
        default=None,
        metavar="TYPE",
        help="all | apartment | house | condo | townhouse | studio | duplex",
    )
    browse.add_argument(
        "--sort",
        default=None,
        metavar="KEY",
        help="newest | price-low | price-high | rating (default: DEFAULT_SORT)",
    )
    browse.add_argument(
        "--view",
        default=ViewMode.GRID.value,
        choices=[mode.value for mode in ViewMode],
        help="Card layout (default: grid).",
    )
    browse.add_argument(
        "--save",
        nargs="*",
        default=[],
        metavar="ID",
        help="Mark these property ids as saved.",
    )

    add = sub.add_parser("add", help="Validate a new listing and print it.")
    add.add_argument("--title", default="")
    add.add_argument("--location", default="")
    add.add_argument("--price", default="", help="Monthly rent.")
    add.add_argument("--type", dest="property_type", default="", metavar="TYPE")
    add.add_argument("--bedrooms", default="", help="studio | 1 | 2 | 3 | 4+")
    add.add_argument("--bathrooms", default="")
    add.add_argument("--description", default="")
    add.add_argument("--amenity", dest="amenities", action="append", default=[])
    add.add_argument("--landlord", default="", help="Landlord display name.")

    show = sub.add_parser("show", help="Print the detail view of one property.")
    show.add_argument("property_id", metavar="ID")

    signin = sub.add_parser("signin", help="Sign in against the demo back end.")
    signin.add_argument("--email", default="")
    signin.add_argument("--password", default="")
    signin.add_argument(
        "--demo",
        default=None,
        choices=["tenant", "landlord"],
        help="Fill in the demo account for this role.",
    )

    signup = sub.add_parser("signup", help="Create an account on the demo back end.")
    signup.add_argument("--name", default="")
    signup.add_argument("--email", default="")
    signup.add_argument("--password", default="")
    signup.add_argument(
        "--confirm-password",
        default=None,
        help="Defaults to --password.",
    )
    signup.add_argument("--role", default="", help="tenant | landlord")
    signup.add_argument("--phone", default="", help="Required for landlords.")
    return parser


# ---------------------------------------------------------------------------
# Listing commands
# ---------------------------------------------------------------------------


def _cmd_browse(args: argparse.Namespace, settings: Settings, catalog: PropertyCatalog) -> int:
    state = ListingsViewState(catalog.all(), settings.to_filter_criteria())

    changes = {
        "search_term": args.search,
        "price_bucket": args.price,
        "bedroom_bucket": args.bedrooms,
        "property_type": args.property_type,
        "sort_by": args.sort,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    if changes:
        state.set_criteria(state.criteria.replace(**changes))

    for property_id in args.save:
        if property_id not in catalog:
            logger.warning("Ignoring --save for unknown property %r", property_id)
            continue
        if state.is_saved(property_id):
            continue
        state.toggle_saved(property_id)
    mode = state.set_view_mode(args.view)

    print(format_results_header(state.result_count, len(catalog)))  # noqa: T201
    symbol = settings.currency_symbol
    for record in state.visible:
        saved = state.is_saved(record.id)
        if mode is ViewMode.LIST:
            print(format_row(record, saved=saved, symbol=symbol))  # noqa: T201
        else:
            print()  # noqa: T201
            print(format_card(record, saved=saved, symbol=symbol))  # noqa: T201
    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings, catalog: PropertyCatalog) -> int:
    record = catalog.get(args.property_id)
    print(format_detail(record, symbol=settings.currency_symbol))  # noqa: T201
    return 0


def _cmd_add(args: argparse.Namespace, settings: Settings, catalog: PropertyCatalog) -> int:
    form = AddPropertyForm(
        title=args.title,
        location=args.location,
        price=args.price,
        property_type=args.property_type,
        bedrooms=args.bedrooms,
        bathrooms=args.bathrooms,
        description=args.description,
        amenities=tuple(args.amenities),
    )
    errors = form.validate()
    if errors:
        print("Error: Please fix the errors below before submitting", file=sys.stderr)  # noqa: T201
        for field_name, message in errors.items():
            print(f"  {field_name}: {message}", file=sys.stderr)  # noqa: T201
        return 1

    record = form.to_record(landlord=args.landlord)
    catalog = catalog.with_record(record)
    print("Property listed successfully!")  # noqa: T201
    print(format_detail(record, symbol=settings.currency_symbol))  # noqa: T201
    print()  # noqa: T201
    print(f"Catalog now holds {len(catalog)} properties.")  # noqa: T201
    return 0


# ---------------------------------------------------------------------------
# Auth commands
# ---------------------------------------------------------------------------


def _report(result: AuthResult) -> int:
    if result.success:
        if result.message:
            print(result.message)  # noqa: T201
        if result.user is not None:
            print(f"Signed in as {result.user.name or result.user.email} ({result.user.role.value})")  # noqa: T201
        print(f"Redirect: {result.redirect_path}")  # noqa: T201
        return 0
    if result.error:
        print(f"Error: {result.error}", file=sys.stderr)  # noqa: T201
    for field_name, message in result.field_errors.items():
        print(f"  {field_name}: {message}", file=sys.stderr)  # noqa: T201
    return 1


async def _signin(args: argparse.Namespace, settings: Settings) -> AuthResult:
    backend = DemoAuthBackend()
    email, password = args.email, args.password
    if args.demo:
        email, password = backend.demo_credentials(args.demo) or (email, password)
    controller = AuthController(backend, SessionStore(), settings)
    return await controller.sign_in(SignInForm(email=email, password=password))


async def _signup(args: argparse.Namespace, settings: Settings) -> AuthResult:
    form = SignUpForm(
        name=args.name,
        email=args.email,
        password=args.password,
        confirm_password=args.password if args.confirm_password is None else args.confirm_password,
        role=args.role,
        phone=args.phone,
    )
    controller = AuthController(DemoAuthBackend(), SessionStore(), settings)
    return await controller.sign_up(form)


def _dispatch(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "signin":
        return _report(asyncio.run(_signin(args, settings)))
    if args.command == "signup":
        return _report(asyncio.run(_signup(args, settings)))

    catalog = load_catalog(settings)
    if args.command == "add":
        return _cmd_add(args, settings, catalog)
    if args.command == "show":
        return _cmd_show(args, settings, catalog)
    return _cmd_browse(args, settings, catalog)


def main(argv: list[str] | None = None) -> None:
    """CLI entry-point registered in ``pyproject.toml``."""
    args = _build_parser().parse_args(argv)

    try:
        configure_logging(level=args.log_level, fmt=args.log_format)
    except ValueError as exc:
        print(f"nyumba: configuration error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"nyumba: configuration error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    with session_scope(uuid4().hex[:8]):
        logger.debug("Running %s", args.command)
        try:
            status = _dispatch(args, settings)
        except ConfigError as exc:
            logger.critical("Configuration error: %s", exc)
            sys.exit(1)
        except CatalogError as exc:
            logger.error("%s", exc)
            print(f"nyumba: {exc}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Interrupted, exiting.")
            sys.exit(0)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
