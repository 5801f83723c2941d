"""Translation of domain exceptions into HTTP errors with user-facing notices."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from inventory_dashboard.domain.exceptions import (
    EntityNotFoundError,
    OperationInProgressError,
    RemoteStoreError,
)

logger = logging.getLogger(__name__)

LOAD_FAILED = "Fehler beim Laden der Daten"
CREATE_ITEM_FAILED = "Fehler beim Erstellen des Artikels"
UPDATE_ITEM_FAILED = "Fehler beim Aktualisieren des Artikels"
DELETE_ITEM_FAILED = "Fehler beim Löschen des Artikels"
CREATE_CATEGORY_FAILED = "Fehler beim Erstellen der Kategorie"
UPDATE_CATEGORY_FAILED = "Fehler beim Aktualisieren der Kategorie"
DELETE_CATEGORY_FAILED = "Fehler beim Löschen der Kategorie"
CREATE_LOCATION_FAILED = "Fehler beim Erstellen des Lagerorts"
UPDATE_LOCATION_FAILED = "Fehler beim Aktualisieren des Lagerorts"
DELETE_LOCATION_FAILED = "Fehler beim Löschen des Lagerorts"


@contextmanager
def store_errors(notice: str) -> Iterator[None]:
    """Map store failures to 502, unknown records to 404 and busy saves to 409."""
    try:
        yield
    except RemoteStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"notice": notice, "body": e.body},
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except OperationInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
