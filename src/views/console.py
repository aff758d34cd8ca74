"""
Rich console views for lecturers and managers.

- Claim form: preview the total and submit a claim
- Tracking view: every claim with its colour-coded status
- Manager view: one card per pending claim with approve/reject actions
"""

import logging
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ..claims.attachments import (
    SUPPORTED_DOCUMENT_TYPES,
    document_display_name,
    is_supported_document,
)
from ..claims.calculator import compute_total, format_amount
from ..claims.errors import ClaimError, DocumentTooLargeError
from ..claims.schema import Claim, ClaimStatus
from ..storage.claim_store import ClaimStore
from ..utils.config import Settings

logger = logging.getLogger(__name__)


STATUS_COLORS = {
    ClaimStatus.PENDING: "#f39c12",
    ClaimStatus.APPROVED: "#27ae60",
    ClaimStatus.REJECTED: "#e74c3c",
}

MENU_CHOICES = ["submit", "track", "review", "quit"]


def status_text(status: ClaimStatus) -> Text:
    """Render a status label in its display colour."""
    return Text(status.value, style=f"bold {STATUS_COLORS[status]}")


def build_claims_table(claims: Iterable[Claim]) -> Table:
    """Create the tracking table listing every claim."""
    table = Table(
        title="📋 Claims",
        box=box.ROUNDED,
        header_style="bold cyan",
    )

    table.add_column("Id", style="bold", justify="right")
    table.add_column("Lecturer")
    table.add_column("Date", style="dim")
    table.add_column("Hours", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Status")
    table.add_column("Documents")

    for claim in claims:
        table.add_row(
            str(claim.claim_id),
            claim.lecturer_name,
            claim.submitted_on_display,
            f"{claim.hours:g}",
            format_amount(claim.hourly_rate),
            format_amount(claim.total_amount),
            status_text(claim.status),
            claim.document_name,
        )

    return table


def build_claim_card(claim: Claim) -> Panel:
    """Create the manager's review card for a single claim."""
    body = Table.grid(padding=(0, 1))
    body.add_column(style="bold cyan")
    body.add_column(overflow="fold")

    body.add_row("Date", claim.submitted_on_display)
    body.add_row("Hours", f"{claim.hours:g} @ {format_amount(claim.hourly_rate)}")
    body.add_row("Total", format_amount(claim.total_amount))
    body.add_row("Notes", claim.notes or "-")
    body.add_row("Documents", claim.document_info)

    return Panel(
        body,
        title=f"#{claim.claim_id} {claim.lecturer_name}",
        subtitle=status_text(claim.status),
        box=box.ROUNDED,
    )


def build_pending_view(claims: List[Claim]):
    """Create the manager view for the given pending claims."""
    if not claims:
        return Text("No pending claims to review.", style="dim")
    return Group(*(build_claim_card(claim) for claim in claims))


class ClaimConsole:
    """
    Prompt-driven console replacing the lecturer, tracking and manager windows.

    Usage:
        ClaimConsole(ClaimStore(), get_settings()).run()
    """

    def __init__(self, store: ClaimStore, settings: Settings, console: Optional[Console] = None):
        self.store = store
        self.settings = settings
        self.console = console or Console()

    def run(self) -> None:
        """Show the menu until the user quits."""
        self.console.print(f"[bold]Claim Tracker[/bold] - signed in as {self.settings.current_lecturer}")
        while True:
            choice = Prompt.ask(
                "\nWhat would you like to do",
                choices=MENU_CHOICES,
                default="track",
                console=self.console,
            )
            if choice == "quit":
                break
            if choice == "submit":
                self.submit_claim()
            elif choice == "track":
                self.show_claims()
            elif choice == "review":
                self.review_claims()

    # ------------------------------------------------------------------
    # Lecturer
    # ------------------------------------------------------------------

    def submit_claim(self) -> Optional[Claim]:
        """Collect the claim form and submit it."""
        hours = Prompt.ask("Hours worked", default="0", console=self.console)
        rate = Prompt.ask("Hourly rate", default="0", console=self.console)
        self.console.print(f"Total amount: [bold]{format_amount(compute_total(hours, rate))}[/bold]")

        notes = Prompt.ask("Notes", default="", console=self.console)
        path = Prompt.ask("Supporting document path (blank for none)", default="", console=self.console)

        document_name = None
        if path.strip():
            try:
                document_name = document_display_name(path.strip(), self.settings.max_document_bytes)
            except DocumentTooLargeError as e:
                self._warn("File Too Large", e.message)
                return None
            except FileNotFoundError:
                self._warn("File Not Found", f"No file at {path.strip()}")
                return None
            if not is_supported_document(document_name):
                self.console.print(
                    f"[yellow]{document_name} is not a {', '.join(SUPPORTED_DOCUMENT_TYPES)} file; "
                    "attaching it anyway.[/yellow]"
                )

        try:
            claim = self.store.submit(
                self.settings.current_lecturer,
                hours,
                rate,
                notes=notes,
                document_name=document_name,
            )
        except ClaimError as e:
            self._warn("Validation Error", e.message)
            return None

        self.console.print("[green]Claim submitted successfully![/green]")
        self.show_claims()
        return claim

    def show_claims(self) -> None:
        """Tracking view. Shows every claim regardless of lecturer."""
        self.console.print(build_claims_table(self.store.list_all()))

    # ------------------------------------------------------------------
    # Manager
    # ------------------------------------------------------------------

    def show_pending(self) -> List[Claim]:
        pending = self.store.list_by_status(ClaimStatus.PENDING)
        self.console.print(build_pending_view(pending))
        return pending

    def review_claims(self) -> Optional[Claim]:
        """Show pending claims and apply one approve/reject decision."""
        if not self.show_pending():
            return None

        raw_id = Prompt.ask("Claim id to review (blank to go back)", default="", console=self.console)
        if not raw_id.strip():
            return None
        try:
            claim_id = int(raw_id)
        except ValueError:
            self._warn("Invalid Claim", f"'{raw_id}' is not a claim id")
            return None

        action = Prompt.ask("Decision", choices=["approve", "reject"], console=self.console)
        try:
            if action == "approve":
                claim = self.store.approve(claim_id)
            else:
                claim = self.store.reject(claim_id)
        except ClaimError as e:
            self._warn("Review Failed", e.message)
            return None

        self.console.print(
            Text(
                f"Claim from {claim.lecturer_name} has been {claim.status.value.lower()}.",
                style=STATUS_COLORS[claim.status],
            )
        )
        self.show_pending()
        return claim

    def _warn(self, title: str, message: str) -> None:
        self.console.print(Panel(message, title=title, border_style="yellow"))
