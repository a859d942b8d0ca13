from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import parse_id
from ..core.result import Result
from .model import Client, ClientCommand, ClientResponse, UpdateClientCommand
from .repository import ClientRepository
from .validators import ClientCommandValidator

logger = logging.getLogger(__name__)

CLIENT_INVALID = "Client Invalid"


def _clean_numbers(numbers) -> tuple[str, ...]:
    return tuple(str(n).strip() for n in (numbers or []) if str(n).strip())


def to_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=str(client.client_id),
        name=client.name,
        email=client.email,
        contact_numbers=list(client.contact_numbers),
    )


class ClientService:
    def __init__(self, clients: ClientRepository):
        self._clients = clients
        self._create_validator = ClientCommandValidator(require_name=True)
        self._update_validator = ClientCommandValidator(require_name=False)

    def create_client(self, command: ClientCommand) -> Result:
        validation = self._create_validator.validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        client = Client(
            client_id=None,
            name=command.name.strip(),
            email=(command.email or "").strip(),
            contact_numbers=_clean_numbers(command.contact_numbers),
        )
        client_id = self._clients.insert(client)
        logger.info("Client created: client_id=%s", client_id)
        return Result.created(to_response(client.with_id(client_id)))

    def get_all_clients(self, amount: Optional[int] = None) -> Result:
        return Result.ok([to_response(c) for c in self._clients.list_all(amount=amount)])

    def get_client_by_id(self, client_id) -> Result:
        client = self._find(client_id)
        if not client:
            return Result.fail(CLIENT_INVALID)
        return Result.ok(to_response(client))

    def update_client(self, command: UpdateClientCommand) -> Result:
        validation = self._update_validator.validate(command)
        if not validation.is_valid:
            return Result.from_validation(validation)

        client = self._find(command.id)
        if not client:
            return Result.fail(CLIENT_INVALID)

        updated = Client(
            client_id=client.client_id,
            name=command.name.strip() if command.name is not None else client.name,
            email=command.email.strip() if command.email is not None else client.email,
            contact_numbers=(
                _clean_numbers(command.contact_numbers)
                if command.contact_numbers is not None
                else client.contact_numbers
            ),
        )
        self._clients.update(updated)
        return Result.ok()

    def delete_client(self, client_id) -> Result:
        cid = parse_id(client_id)
        if cid is None or not self._clients.delete_by_id(cid):
            return Result.fail(CLIENT_INVALID)
        logger.info("Client deleted: client_id=%s", cid)
        return Result.ok()

    def _find(self, client_id) -> Optional[Client]:
        cid = parse_id(client_id)
        return self._clients.get_by_id(cid) if cid is not None else None
