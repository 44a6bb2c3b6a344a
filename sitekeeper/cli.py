"""CLI commands for SiteKeeper."""

import json
from pathlib import Path
from typing import Any, Callable, Optional

import click

from .config import get_settings
from .controllers import (
    SORT_KEYS,
    WebsiteNotFoundError,
    WebsiteValidationError,
    create_website,
    default_form_values,
    delete_website,
    form_values,
    get_website,
    list_websites,
    prefilled_form_values,
    summarize,
    update_website,
)
from .db import Database
from .log import setup_logging
from .models import CATEGORIES, CURRENCIES, PRICING_TYPES, STATUSES, PaidPricing, Pricing, Website
from .prefill import PrefillError, fetch_site_metadata
from .schema import FieldError, validate_website
from .seed import seed_websites
from .store import SlotPersistence, WebsiteStore

STATUS_COLORS = {"active": "green", "inactive": "red", "pending": "yellow"}


@click.group()
@click.version_option()
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="SQLite database file (defaults to ~/.sitekeeper/sitekeeper.db)",
)
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[Path]):
    """SiteKeeper - Manage a directory of websites, their offers and article specs."""
    settings = get_settings()
    setup_logging(settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path or settings.db_path


def _open_store(ctx: click.Context) -> tuple[Database, WebsiteStore]:
    """Open the database and load the website store from its slot."""
    settings = get_settings()
    db = Database(ctx.obj["db_path"])
    seed = seed_websites() if settings.seed_on_first_run else []
    store = WebsiteStore(SlotPersistence(db, settings.slot_name), seed=seed)
    return db, store


@cli.command("list")
@click.option("--search", "-s", help="Only show websites whose name contains this text")
@click.option("--status", type=click.Choice(STATUSES), help="Filter by status")
@click.option("--pricing", type=click.Choice(PRICING_TYPES), help="Filter by pricing type")
@click.option("--sort", "sort_by", type=click.Choice(SORT_KEYS), help="Sort by this column")
@click.option("--desc", is_flag=True, help="Sort in descending order")
@click.pass_context
def list_command(
    ctx: click.Context,
    search: Optional[str],
    status: Optional[str],
    pricing: Optional[str],
    sort_by: Optional[str],
    desc: bool,
):
    """List websites."""
    db, store = _open_store(ctx)
    try:
        summary = summarize(store.list_websites())
        click.echo(
            click.style(f"Total websites: {summary.total}", fg="cyan", bold=True)
            + f" | Active: {summary.active} ({summary.active_percent}%)"
            + f" | Paid: {summary.paid}"
        )
        click.echo()

        websites = list_websites(
            store,
            search=search,
            status=status,
            pricing=pricing,
            sort_by=sort_by,
            descending=desc,
        )
        if not websites:
            if summary.total:
                click.echo("No websites match the given filters.")
            else:
                click.echo("No websites yet. Use 'sitekeeper add' to add one.")
            return

        for website in websites:
            _print_website_row(website)
    finally:
        db.close()


def _print_website_row(website: Website):
    """Print a single website in the list."""
    id_str = click.style(f"[{website.id}]", fg="cyan")
    status = click.style(website.status, fg=STATUS_COLORS.get(website.status, "white"))

    click.echo(f"  {id_str} " + click.style(website.name, fg="white", bold=True))
    click.echo(f"       URL: {website.url}")
    click.echo(
        f"       Category: {website.category} | Status: {status} | "
        f"Pricing: {_pricing_label(website.offers.pricing)}"
    )
    click.echo(f"       Updated: {website.updated_at.strftime('%Y-%m-%d')}")
    click.echo()


def _pricing_label(pricing: Pricing) -> str:
    if isinstance(pricing, PaidPricing):
        return f"{pricing.amount} {pricing.currency}/{pricing.billing_cycle}"
    return pricing.type.capitalize()


@cli.command()
@click.argument("website_id")
@click.pass_context
def show(ctx: click.Context, website_id: str):
    """Show all details of a website."""
    db, store = _open_store(ctx)
    try:
        try:
            website = get_website(store, website_id)
        except WebsiteNotFoundError as e:
            click.echo(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1)

        _print_website_details(website)
    finally:
        db.close()


def _print_website_details(website: Website):
    """Print every field of a website."""
    offers = website.offers
    specs = website.article_specs
    seo = specs.seo_requirements

    click.echo(click.style(website.name, fg="cyan", bold=True) + f" [{website.id}]")
    click.echo(f"  URL: {website.url}")
    click.echo(f"  Category: {website.category}")
    click.echo("  Status: " + click.style(website.status, fg=STATUS_COLORS.get(website.status, "white")))
    click.echo(f"  Description: {website.description}")
    click.echo(f"  Created: {website.created_at.strftime('%Y-%m-%d %H:%M')}")
    click.echo(f"  Updated: {website.updated_at.strftime('%Y-%m-%d %H:%M')}")
    click.echo()

    click.echo(click.style("Offers", fg="white", bold=True))
    click.echo(f"  Pricing: {_pricing_label(offers.pricing)}")
    click.echo(f"  Features: {', '.join(offers.features)}")
    click.echo(f"  Target audience: {', '.join(offers.target_audience)}")
    click.echo(f"  Unique selling points: {', '.join(offers.unique_selling_points)}")
    click.echo()

    click.echo(click.style("Article specifications", fg="white", bold=True))
    click.echo(f"  Content types: {', '.join(specs.content_types)}")
    click.echo(f"  Word count: {specs.word_count_range.min}-{specs.word_count_range.max}")
    click.echo(f"  Tone of voice: {', '.join(specs.tone_of_voice)}")
    click.echo(f"  Required sections: {', '.join(specs.required_sections)}")
    click.echo(
        "  SEO: "
        f"meta description {_yes_no(seo.meta_description)}, "
        f"keywords {_yes_no(seo.keywords)}, "
        f"heading structure {_yes_no(seo.heading_structure)}"
    )
    click.echo(f"  Submission guidelines: {specs.submission_guidelines}")


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read form values from a JSON file instead of opening an editor",
)
@click.option("--prefill-from", "prefill_url", help="Prefill name and description from this homepage")
@click.pass_context
def add(ctx: click.Context, file_path: Optional[Path], prefill_url: Optional[str]):
    """Add a new website.

    Without --file, the form opens in $EDITOR as JSON. If it doesn't validate,
    the errors are shown and the editor can be reopened with your changes.
    """
    delay = get_settings().submit_delay
    db, store = _open_store(ctx)
    try:
        def submit(values: Any) -> Website:
            return create_website(store, values, delay=delay)

        if file_path:
            website = _submit_file(file_path, submit)
        else:
            website = _edit_until_valid(_initial_values(prefill_url), submit)
            if website is None:
                click.echo("Cancelled, no website added.")
                return

        click.echo(click.style(f"Added website '{website.name}' ({website.id})", fg="green"))
    finally:
        db.close()


@cli.command()
@click.argument("website_id")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read form values from a JSON file instead of opening an editor",
)
@click.pass_context
def edit(ctx: click.Context, website_id: str, file_path: Optional[Path]):
    """Edit an existing website."""
    delay = get_settings().submit_delay
    db, store = _open_store(ctx)
    try:
        try:
            current = get_website(store, website_id)
        except WebsiteNotFoundError as e:
            click.echo(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1)

        def submit(values: Any) -> Website:
            return update_website(store, website_id, values, delay=delay)

        if file_path:
            website = _submit_file(file_path, submit)
        else:
            website = _edit_until_valid(form_values(current), submit)
            if website is None:
                click.echo("No changes made.")
                return

        click.echo(click.style(f"Updated website '{website.name}'", fg="green"))
    finally:
        db.close()


@cli.command()
@click.argument("website_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def remove(ctx: click.Context, website_id: str, yes: bool):
    """Remove a website."""
    db, store = _open_store(ctx)
    try:
        website = store.get_website(website_id)
        if not website:
            click.echo(click.style(f"Error: Website '{website_id}' not found", fg="red"))
            raise SystemExit(1)

        if not yes:
            click.confirm(f"Remove website '{website.name}'?", abort=True)

        delete_website(store, website_id)
        click.echo(click.style(f"Removed website '{website.name}'", fg="green"))
    finally:
        db.close()


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(file_path: Path):
    """Check a JSON file of form values without saving it."""
    result = validate_website(_read_values_file(file_path))
    if result.ok:
        click.echo(click.style("Website data is valid.", fg="green"))
        return

    _print_field_errors(result.errors)
    raise SystemExit(1)


@cli.command()
@click.option("--prefill-from", "prefill_url", help="Prefill name and description from this homepage")
def template(prefill_url: Optional[str]):
    """Print a blank website form as JSON."""
    click.echo(json.dumps(_initial_values(prefill_url), indent=2))


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Discard all saved websites and start over from the examples."""
    settings = get_settings()
    if not yes:
        click.confirm("Discard all saved websites?", abort=True)

    db = Database(ctx.obj["db_path"])
    try:
        db.delete_slot(settings.slot_name)
        click.echo(click.style("Saved websites discarded.", fg="green"))
    finally:
        db.close()


def _initial_values(prefill_url: Optional[str]) -> dict[str, Any]:
    """Blank form values, prefilled from a homepage when a URL is given."""
    if not prefill_url:
        return default_form_values()

    try:
        metadata = fetch_site_metadata(prefill_url)
    except PrefillError as e:
        click.echo(click.style(f"Warning: {e}", fg="yellow"), err=True)
        values = default_form_values()
        values["url"] = prefill_url
        return values

    return prefilled_form_values(metadata)


def _read_values_file(file_path: Path) -> Any:
    """Load form values from a JSON file, exiting on unreadable or invalid JSON."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        click.echo(click.style(f"Error: {file_path} is not valid UTF-8: {e}", fg="red"))
        raise SystemExit(1)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        click.echo(click.style(f"Error: Invalid JSON in {file_path}: {e}", fg="red"))
        raise SystemExit(1)


def _submit_file(file_path: Path, submit: Callable[[Any], Website]) -> Website:
    """Submit form values read from a file, exiting on validation errors."""
    try:
        return submit(_read_values_file(file_path))
    except WebsiteValidationError as e:
        _print_field_errors(e.errors)
        raise SystemExit(1)


def _edit_until_valid(
    values: dict[str, Any], submit: Callable[[Any], Website]
) -> Optional[Website]:
    """Open the form in an editor until it is submitted successfully.

    The edited text is kept between attempts so nothing has to be re-entered.

    Returns:
        The submitted Website, or None if the editor was closed without saving
    """
    click.echo(f"Suggested categories: {', '.join(CATEGORIES)}")
    click.echo(f"Suggested currencies: {', '.join(CURRENCIES)}")

    text = json.dumps(values, indent=2)
    while True:
        edited = click.edit(text, extension=".json")
        if edited is None:
            return None
        text = edited

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            click.echo(click.style(f"Error: Invalid JSON: {e}", fg="red"))
        else:
            try:
                return submit(parsed)
            except WebsiteValidationError as e:
                _print_field_errors(e.errors)

        if not click.confirm("Edit again?", default=True):
            raise SystemExit(1)


def _print_field_errors(errors: list[FieldError]):
    """Print validation errors grouped under their field paths."""
    click.echo(click.style("Error: Website data is invalid:", fg="red"))
    for error in errors:
        path = error.path or "(form)"
        click.echo(f"  {click.style(path, fg='yellow')}: {error.message}")


if __name__ == "__main__":
    cli()
