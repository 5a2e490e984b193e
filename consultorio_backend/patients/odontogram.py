"""Odontogram model: per-patient mapping of tooth -> clinical condition code.

The tooth domain is fixed to the 32 permanent teeth in FDI notation and the
condition codes to ``ToothStatus``. The mapping is stored sparsely on the
patient (``Patient.odontogram``): a tooth missing from the mapping has status
``ToothStatus.NONE``.

Both the patient odontogram page and the consultation page go through this
class, so validation and display stay identical for the two entry points.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from django.db import models

from consultorio_backend.patients.exceptions import InvalidOdontogramEntry

logger = logging.getLogger(__name__)


# Display order: upper arch right->left, then lower arch right->left.
TEETH: tuple[str, ...] = (
    '18', '17', '16', '15', '14', '13', '12', '11',
    '21', '22', '23', '24', '25', '26', '27', '28',
    '48', '47', '46', '45', '44', '43', '42', '41',
    '31', '32', '33', '34', '35', '36', '37', '38',
)

TOOTH_SET = frozenset(TEETH)


class ToothStatus(models.TextChoices):
    NONE = '', 'Nenhum'
    REMOVABLE_PARTIAL_DENTURE = 'PPR', 'Prótese parcial removível'
    SINGLE_CROWN_PROSTHESIS = 'PCU', 'Prótese coronária unitária'
    TEMPORARY_PROSTHESIS = 'PT', 'Prótese temporária'
    MISSING = 'A', 'Ausente'
    CALCULUS = 'Cd', 'Cálculo dental'
    CARIES = 'C', 'Cariado'
    CROWN = 'Cr', 'Coroa'
    EXTRACTION_INDICATED = 'Ix', 'Extração indicada'
    FRACTURE = 'F', 'Fratura'
    HEALTHY = 'H', 'Hígido'
    HEALTHY_SEALED = 'Hs', 'Hígido selado'
    IMPLANT = 'I', 'Implante'
    ACTIVE_WHITE_SPOT = 'M', 'Mancha branca ativa'
    PLANE = 'P', 'Plano'
    RESTORED = 'R', 'Restaurado'
    RESTORED_WITH_CARIES = 'Rc', 'Restaurado com cárie'
    RESTORED_WITH_PLAQUE = 'Rp', 'Restaurado com placa'
    GINGIVAL_RETOUCH = 'Rg', 'Retoque gengival'
    SEALANT_INDICATED = 'S', 'Selante indicado'


STATUS_LABELS: dict[str, str] = {code: str(label) for code, label in ToothStatus.choices}


def validate_tooth(tooth: Any) -> str:
    tooth = str(tooth).strip()
    if tooth not in TOOTH_SET:
        raise InvalidOdontogramEntry(
            f'Unknown tooth {tooth!r}; expected an FDI permanent tooth number.',
            tooth=tooth,
        )
    return tooth


def validate_code(code: Any, *, tooth: str | None = None) -> str:
    code = '' if code is None else str(code).strip()
    if code not in STATUS_LABELS:
        raise InvalidOdontogramEntry(
            f'Unknown tooth status {code!r}.',
            tooth=tooth,
            code=code,
        )
    return code


def display_label(tooth: str, code: str) -> str:
    """Button label as shown on the chart: ``"18"`` or ``"18 (C)"``."""
    return f'{tooth} ({code})' if code else tooth


class Odontogram:
    """Typed view over a patient's sparse tooth -> code mapping."""

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = {}
        for tooth, code in (entries or {}).items():
            self.set(tooth, code)

    @classmethod
    def for_patient(cls, patient) -> 'Odontogram':
        """Chart stored on ``patient``.

        Stored entries that are not a valid tooth/code pair are skipped with a
        warning, so a bad row never breaks the chart pages.
        """
        stored = patient.odontogram or {}
        chart = cls()
        if not isinstance(stored, Mapping):
            logger.warning(
                'Ignoring odontogram of patient %s: expected an object, got %s',
                patient.pk,
                type(stored).__name__,
            )
            return chart
        for tooth, code in stored.items():
            try:
                chart.set(tooth, code)
            except InvalidOdontogramEntry as e:
                logger.warning(
                    'Skipping stored odontogram entry %r=%r of patient %s: %s',
                    tooth,
                    code,
                    patient.pk,
                    e,
                )
        return chart

    def status_of(self, tooth: str) -> str:
        tooth = validate_tooth(tooth)
        return self._entries.get(tooth, ToothStatus.NONE.value)

    def set(self, tooth: str, code: str) -> None:
        tooth = validate_tooth(tooth)
        code = validate_code(code, tooth=tooth)
        if code:
            self._entries[tooth] = code
        else:
            self._entries.pop(tooth, None)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for tooth in TEETH:
            yield tooth, self._entries.get(tooth, ToothStatus.NONE.value)

    def to_dict(self) -> dict[str, str]:
        return {tooth: self._entries[tooth] for tooth in TEETH if tooth in self._entries}

    def chart(self) -> list[dict[str, str]]:
        return [
            {
                'tooth': tooth,
                'code': code,
                'label': STATUS_LABELS[code],
                'display': display_label(tooth, code),
            }
            for tooth, code in self
        ]
