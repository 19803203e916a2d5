"""
Console commands for the ledger.

    flask --app run ledger repl           interactive command loop
    flask --app run ledger participants   list registered participants

Command loop syntax:
    EXPENSE <payer> <amount> <n> <id1> .. <idn> EQUAL
    EXPENSE <payer> <amount> <n> <id1> .. <idn> EXACT <amount1> .. <amountn>
    EXPENSE <payer> <amount> <n> <id1> .. <idn> PERCENT <pct1> .. <pctn>
    PAY <payer> <payee> <amount>
    SHOW [<id>]
    EXIT
"""
import logging

import click
from flask.cli import AppGroup

from splitledger.balances.reports import (
    NO_BALANCES,
    all_balance_lines,
    balance_lines_for,
    payment_line,
    settled_line,
)
from splitledger.core import LedgerError, UnknownParticipant
from splitledger.extensions import get_state
from splitledger.utils.enums import SplitKind

logger = logging.getLogger(__name__)

ledger_cli = AppGroup("ledger", help="Shared expense ledger commands.")


class CommandError(Exception):
    """A command line that cannot be parsed."""


class CommandProcessor:
    """Parses one command line at a time and runs it against the ledger."""

    def __init__(self, state, echo=click.echo):
        self.state = state
        self.echo = echo
        self.handlers = {
            "EXPENSE": self.expense,
            "PAY": self.pay,
            "SHOW": self.show,
        }

    def handle(self, line: str) -> bool:
        """Run one line. Returns False when the loop should stop."""
        tokens = line.split()
        if not tokens:
            return True

        command = tokens[0].upper()
        if command == "EXIT":
            self.echo("Exiting the application.")
            return False

        handler = self.handlers.get(command)
        if handler is None:
            self.echo("Invalid command. Please try again.")
            return True

        try:
            handler(tokens)
        except CommandError as e:
            self.echo(f"Invalid command format: {e}")
        except LedgerError as e:
            logger.warning("Rejected %s: %s", command, e.message)
            self.echo(e.message)
        return True

    def expense(self, tokens):
        try:
            payer_id, amount = tokens[1], tokens[2]
            count = int(tokens[3])
            participant_ids = tokens[4:4 + count]
            kind_token = tokens[4 + count]
        except (IndexError, ValueError):
            raise CommandError("EXPENSE <payer> <amount> <n> <ids...> <EQUAL|EXACT|PERCENT> [values...]")
        if count < 0 or len(participant_ids) != count:
            raise CommandError(f"expected {count} participant ids")

        try:
            kind = SplitKind.parse(kind_token)
        except ValueError:
            self.echo("Invalid expense type.")
            return

        if kind == SplitKind.EQUAL:
            descriptors = participant_ids
        else:
            values = tokens[5 + count:5 + 2 * count]
            if len(values) != count:
                raise CommandError(f"expected {count} values for {kind.name}")
            descriptors = list(zip(participant_ids, values))

        self.state.record_expense(kind, amount, payer_id, descriptors)

    def pay(self, tokens):
        if len(tokens) < 4:
            raise CommandError("PAY <payer> <payee> <amount>")
        payer_id, payee_id, amount = tokens[1], tokens[2], tokens[3]

        ledger = self.state.ledger
        try:
            payment = ledger.apply_payment(payer_id, payee_id, amount)
        except UnknownParticipant:
            self.echo("Invalid user IDs provided.")
            return
        self.echo(payment_line(self.state.directory, payer_id, payee_id, payment.amount))
        if ledger.is_settled(payer_id, payee_id):
            self.echo(settled_line(self.state.directory, payer_id, payee_id))

    def show(self, tokens):
        ledger = self.state.ledger
        if len(tokens) == 1:
            lines = all_balance_lines(ledger)
        else:
            lines = balance_lines_for(ledger, tokens[1])
        for line in lines or [NO_BALANCES]:
            self.echo(line)


@ledger_cli.command("repl")
def repl():
    """Read commands from stdin until EXIT or end of input."""
    processor = CommandProcessor(get_state())
    with click.open_file("-") as stream:
        while True:
            click.echo("> ", nl=False)
            line = stream.readline()
            if not line:
                click.echo()
                break
            if not processor.handle(line):
                break


@ledger_cli.command("participants")
def list_participants():
    """List registered participants."""
    participants = get_state().directory.all()
    if not participants:
        click.echo("No participants")
        return
    for p in participants:
        click.echo(f"{p.id}\t{p.name}\t{p.email}\t{p.phone}")
