"""Presentation of domain errors on the command line."""

from __future__ import annotations

import click

from webstore.domain.exceptions import DomainException, ErrorKind

EXIT_CODES = {
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.INVALID_ARGUMENT: 2,
    ErrorKind.INSUFFICIENT_STOCK: 2,
    ErrorKind.INVALID_TRANSITION: 2,
    ErrorKind.ALREADY_CANCELED: 2,
    ErrorKind.CONFLICT: 3,
    ErrorKind.UNEXPECTED: 1,
}


class DomainClickException(click.ClickException):

    def __init__(self, exc: DomainException) -> None:
        super().__init__(str(exc))
        self.kind = exc.kind
        self.exit_code = EXIT_CODES[exc.kind]
