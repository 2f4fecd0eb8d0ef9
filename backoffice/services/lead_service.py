# backoffice/services/lead_service.py
import csv
import io
import logging
import uuid
from datetime import datetime, time, timedelta, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.models.lead import Lead
from backoffice.repositories.lead_repo import LeadRepository
from backoffice.schemas.lead import LeadCreate, LeadFilters, LeadStatusUpdate

logger = logging.getLogger(__name__)

STATUS_LABELS: dict[str, str] = {
    "new": "Nuevo",
    "in_progress": "En Proceso",
    "contacted": "Contactado",
    "discarded": "Descartado",
}

CLIENT_TYPE_LABELS: dict[str, str] = {
    "natural": "Persona Natural",
    "company": "Empresa",
}

INTEREST_LABELS: dict[str, str] = {
    "product": "Producto",
    "service": "Servicio",
    "both": "Ambos",
}

CSV_HEADERS = [
    "Fecha Registro",
    "Nombre del Lead",
    "Correo Electrónico",
    "Teléfono",
    "Tipo de Cliente",
    "Número RUC",
    "Interés Principal",
    "Producto Solicitado",
    "Servicio Solicitado",
    "Asunto del Mensaje",
    "Mensaje/Consulta",
    "Estado Actual",
]


def _one_line(value: str | None) -> str:
    if not value:
        return ""
    return str(value).replace("\r", "").replace("\n", " ")


class LeadService:
    """
    Business logic for leads.

    Responsibilities:
      - public submission (status always starts as 'new')
      - admin filters, status transitions, deletion
      - CSV export for Excel (UTF-8 with BOM, ';' separated)
    """

    def __init__(self, repo: LeadRepository):
        self.repo = repo

    def create_lead(self, session: Session, payload: LeadCreate) -> Lead:
        lead = Lead(**payload.model_dump(), status="new")
        lead = self.repo.save(session, lead)
        logger.info(f"New lead {lead.id} ({lead.interest_type or 'general'})")
        return lead

    def list_leads(
        self,
        session: Session,
        filters: LeadFilters,
        skip: int = 0,
        limit: int | None = 50,
    ) -> list[Lead]:
        """
        Date range is inclusive on both ends (whole days, UTC).
        """
        created_from = None
        created_before = None
        if filters.start_date:
            created_from = datetime.combine(filters.start_date, time.min, tzinfo=timezone.utc)
        if filters.end_date:
            created_before = datetime.combine(
                filters.end_date + timedelta(days=1), time.min, tzinfo=timezone.utc
            )

        q = filters.q.strip() if filters.q else None
        return self.repo.list_leads(
            session,
            status=filters.status,
            q=q or None,
            created_from=created_from,
            created_before=created_before,
            skip=skip,
            limit=limit,
        )

    def get_lead(self, session: Session, lead_id: uuid.UUID) -> Lead:
        lead = self.repo.get_by_id(session, lead_id)
        if not lead:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Lead not found",
            )
        return lead

    def update_status(
        self,
        session: Session,
        lead_id: uuid.UUID,
        payload: LeadStatusUpdate,
    ) -> Lead:
        """
        Any status can move to any other status.
        """
        lead = self.get_lead(session, lead_id)
        lead.status = payload.status
        return self.repo.save(session, lead)

    def delete_lead(self, session: Session, lead_id: uuid.UUID) -> None:
        lead = self.get_lead(session, lead_id)
        self.repo.delete(session, lead)

    def export_csv(self, session: Session, filters: LeadFilters) -> str:
        """
        CSV of every lead matching `filters` (no pagination).

        The text starts with a BOM and a `sep=;` hint so Excel opens it with
        the right encoding and separator.
        """
        leads = self.list_leads(session, filters, limit=None)

        buffer = io.StringIO()
        buffer.write("\ufeff")
        buffer.write("sep=;\n")
        writer = csv.writer(buffer, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for lead in leads:
            writer.writerow(
                [
                    lead.created_at.strftime("%d/%m/%Y %H:%M"),
                    _one_line(lead.full_name),
                    _one_line(lead.email),
                    _one_line(lead.phone),
                    CLIENT_TYPE_LABELS.get(lead.client_type or "", ""),
                    _one_line(lead.ruc),
                    INTEREST_LABELS.get(lead.interest_type or "", ""),
                    _one_line(lead.requested_product),
                    _one_line(lead.requested_service),
                    _one_line(lead.subject),
                    _one_line(lead.message),
                    STATUS_LABELS.get(lead.status, lead.status),
                ]
            )
        return buffer.getvalue()
