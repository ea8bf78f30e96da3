# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/file_access.py

Política de acceso de archivos adjuntos.

view:
    uploader o admin pasan siempre. Si no, se delega en la entidad dueña
    (entity_type, entity_id) con una verificación por variante:
        project  -> cliente del proyecto o autor de alguna propuesta en él
        proposal -> freelancer autor o cliente del proyecto de la propuesta
        gig      -> freelancer del gig
        order    -> cliente o freelancer de la orden
    Un entity_type fuera del conjunto cae en la rama de denegación por
    defecto. Una entidad inexistente deniega (sin excepción).
    Denegado -> NotFound.

delete:
    solo uploader o admin (más estrecho que view). Quien puede verlo por
    delegación recibe Forbidden; quien no puede verlo, NotFound.
    Secuencia compensable:
        1) marca delete_requested_at y commit
        2) borra el blob; si falla -> BlobRemovalFailed (la marca queda)
        3) borra la fila y commit
    Reintentar el delete, o reconcile_pending_deletes(), completa lo marcado.
    Un archivo marcado se considera inexistente para lecturas.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Dict, List, Optional

from app.modules.files.enums import FileEntityType
from app.modules.files.facades.upload_validation import (
    DEFAULT_MAX_FILE_SIZE_BYTES,
    validate_upload,
)
from app.modules.files.services.storage.blob_storage import BlobStorage
from app.modules.files.services.storage.safe_filename import build_stored_filename
from app.modules.projects.facades import ProjectAccessPolicy
from app.modules.proposals.facades import ProposalAccessPolicy
from app.observability.metrics import files_delete_total, record_denial
from app.shared.auth_context import Principal
from app.shared.database.entity_store import EntityStore, Row
from app.shared.errors import BlobRemovalFailed, Forbidden, NotFound, ValidationRejected

logger = logging.getLogger(__name__)

EntityCheck = Callable[[int, int], Awaitable[bool]]

_ACTIVE_FILE = "SELECT * FROM files WHERE id = :id AND delete_requested_at IS NULL"


class FileAccessPolicy:
    """Reglas de acceso, subida y borrado de archivos."""

    def __init__(
        self,
        store: EntityStore,
        blobs: BlobStorage,
        *,
        max_upload_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    ):
        self.store = store
        self.blobs = blobs
        self.max_upload_bytes = max_upload_bytes
        self._projects = ProjectAccessPolicy(store)
        self._proposals = ProposalAccessPolicy(store)
        self._entity_checks: Dict[FileEntityType, EntityCheck] = {
            FileEntityType.project: self._projects.is_participant,
            FileEntityType.proposal: self._proposals.is_party,
            FileEntityType.gig: self._can_access_gig,
            FileEntityType.order: self._can_access_order,
        }

    # ------------------------------------------------------------------
    # Delegación por tipo de entidad
    # ------------------------------------------------------------------

    async def _can_access_gig(self, gig_id: int, user_id: int) -> bool:
        gig = await self.store.query_one(
            "SELECT freelancer_id FROM gigs WHERE id = :id", {"id": gig_id}
        )
        return gig is not None and gig["freelancer_id"] == user_id

    async def _can_access_order(self, order_id: int, user_id: int) -> bool:
        order = await self.store.query_one(
            "SELECT client_id, freelancer_id FROM orders WHERE id = :id", {"id": order_id}
        )
        return order is not None and user_id in (order["client_id"], order["freelancer_id"])

    @staticmethod
    async def _deny_unknown(entity_id: int, user_id: int) -> bool:
        return False

    def _check_for(self, entity_type: Optional[str]) -> EntityCheck:
        parsed = FileEntityType.parse(entity_type)
        if parsed is None:
            logger.warning("file_unknown_entity_type: entity_type=%r", entity_type)
            return self._deny_unknown
        return self._entity_checks.get(parsed, self._deny_unknown)

    async def can_access_entity(self, entity_type: Optional[str], entity_id: int, user_id: int) -> bool:
        check = self._check_for(entity_type)
        return await check(entity_id, user_id)

    async def _can_view(self, file: Row, principal: Principal) -> bool:
        if file["uploader_id"] == principal.id or principal.is_admin:
            return True
        return await self.can_access_entity(file["entity_type"], file["entity_id"], principal.id)

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------

    async def view(self, file_id: int, principal: Principal) -> Row:
        """
        Raises:
            NotFound: inexistente, pendiente de borrado o sin acceso
        """
        file = await self.store.query_one(_ACTIVE_FILE, {"id": file_id})
        if file is None:
            raise NotFound("File", file_id)

        if await self._can_view(file, principal):
            return file

        logger.info(
            "file_view_denied: file_id=%s user_id=%s entity=%s:%s",
            file_id, principal.id, file["entity_type"], file["entity_id"],
        )
        record_denial("file", "view")
        raise NotFound("File", file_id)

    async def list_by_entity(self, entity_type: str, entity_id: int) -> List[Row]:
        parsed = FileEntityType.parse(entity_type)
        if parsed is None:
            return []
        return await self.store.query(
            """
            SELECT * FROM files
            WHERE entity_type = :etype AND entity_id = :eid AND delete_requested_at IS NULL
            ORDER BY created_at DESC, id DESC
            """,
            {"etype": parsed.value, "eid": entity_id},
        )

    # ------------------------------------------------------------------
    # Subida
    # ------------------------------------------------------------------

    async def upload(
        self,
        principal: Principal,
        entity_type: str,
        entity_id: int,
        original_name: str,
        content_type: Optional[str],
        data: bytes,
    ) -> Row:
        """
        Valida, guarda el blob y registra los metadatos.

        Si el INSERT falla el blob recién escrito se elimina y el error se
        propaga.

        Raises:
            ValidationRejected: file_too_large, extension_not_allowed,
                mime_type_not_allowed, invalid_entity_type, invalid_filename
            NotFound: el uploader no tiene acceso a la entidad dueña
        """
        validate_upload(original_name, content_type, len(data), self.max_upload_bytes)

        etype = FileEntityType.parse(entity_type)
        if etype is None:
            raise ValidationRejected(
                "invalid_entity_type",
                f"entity_type must be one of: {', '.join(e.value for e in FileEntityType)}",
            )

        if not principal.is_admin and not await self.can_access_entity(etype, entity_id, principal.id):
            logger.info(
                "file_upload_denied: user_id=%s entity=%s:%s", principal.id, etype, entity_id
            )
            record_denial("file", "upload")
            raise NotFound(etype.value.capitalize(), entity_id)

        stored_name = build_stored_filename(original_name)
        path = await self.blobs.store(data, stored_name)
        mime = (content_type or "").split(";", 1)[0].strip().lower()

        async def work() -> int:
            result = await self.store.execute(
                """
                INSERT INTO files
                    (uploader_id, filename, original_name, file_path, file_size,
                     mime_type, entity_type, entity_id)
                VALUES
                    (:uploader_id, :filename, :original_name, :file_path, :file_size,
                     :mime_type, :entity_type, :entity_id)
                RETURNING id
                """,
                {
                    "uploader_id": principal.id,
                    "filename": stored_name,
                    "original_name": original_name,
                    "file_path": path,
                    "file_size": len(data),
                    "mime_type": mime,
                    "entity_type": etype.value,
                    "entity_id": entity_id,
                },
            )
            return result.last_insert_id

        try:
            file_id = await self.store.run_in_transaction(work)
        except Exception:
            logger.error("file_metadata_insert_failed: removing orphan blob %s", path)
            try:
                await self.blobs.remove(path)
            except OSError as e:
                logger.error("orphan_blob_removal_failed: path=%s error=%s", path, e)
            raise

        logger.info(
            "file_uploaded: file_id=%s uploader_id=%s entity=%s:%s size=%d",
            file_id, principal.id, etype, entity_id, len(data),
        )
        return await self.store.query_one(_ACTIVE_FILE, {"id": file_id})

    # ------------------------------------------------------------------
    # Borrado
    # ------------------------------------------------------------------

    async def _finish_delete(self, file: Row) -> None:
        """Pasos 2 y 3: blob y luego fila. Idempotente."""
        path = file["file_path"]
        try:
            if await self.blobs.exists(path):
                await self.blobs.remove(path)
        except OSError as e:
            logger.error(
                "file_blob_removal_failed: file_id=%s path=%s error=%s", file["id"], path, e
            )
            files_delete_total.labels(outcome="pending").inc()
            raise BlobRemovalFailed(file["id"], path) from e

        async def work() -> None:
            await self.store.execute("DELETE FROM files WHERE id = :id", {"id": file["id"]})

        await self.store.run_in_transaction(work)

    async def delete(self, file_id: int, principal: Principal) -> None:
        """
        Borra un archivo (uploader o admin).

        Raises:
            NotFound: inexistente, o el principal ni siquiera puede verlo
            Forbidden: puede verlo por delegación pero no es dueño ni admin
            BlobRemovalFailed: el blob no se pudo borrar; queda pendiente
        """
        file = await self.store.query_one("SELECT * FROM files WHERE id = :id", {"id": file_id})
        if file is None:
            raise NotFound("File", file_id)

        pending = file["delete_requested_at"] is not None
        if file["uploader_id"] != principal.id and not principal.is_admin:
            record_denial("file", "delete")
            if not pending and await self._can_view(file, principal):
                logger.warning(
                    "file_delete_forbidden: file_id=%s user_id=%s", file_id, principal.id
                )
                raise Forbidden("Only the uploader or an admin can delete this file")
            raise NotFound("File", file_id)

        if not pending:
            async def mark() -> None:
                await self.store.execute(
                    "UPDATE files SET delete_requested_at = CURRENT_TIMESTAMP WHERE id = :id",
                    {"id": file_id},
                )

            await self.store.run_in_transaction(mark)

        await self._finish_delete(file)
        files_delete_total.labels(outcome="deleted").inc()
        logger.info("file_deleted: file_id=%s by user_id=%s", file_id, principal.id)

    async def reconcile_pending_deletes(self) -> int:
        """
        Completa los borrados marcados que quedaron a medias.

        Returns:
            Cantidad de archivos completados en esta pasada.
        """
        pending = await self.store.query(
            "SELECT * FROM files WHERE delete_requested_at IS NOT NULL ORDER BY id"
        )
        finished = 0
        for file in pending:
            try:
                await self._finish_delete(file)
            except BlobRemovalFailed:
                continue
            finished += 1
            files_delete_total.labels(outcome="reconciled").inc()

        if pending:
            logger.info(
                "files_reconcile_done: pending=%d finished=%d", len(pending), finished
            )
        return finished


__all__ = ["FileAccessPolicy"]

# Fin del archivo backend/app/modules/files/facades/file_access.py
