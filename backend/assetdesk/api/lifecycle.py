"""Archive / restore / toggle endpoints, identical for every entity router."""
from collections.abc import Callable

from fastapi import APIRouter, Depends

from assetdesk.api.deps import get_actor, get_audit_logs, get_or_404, record_audit
from assetdesk.core.lifecycle import is_archived


def add_lifecycle_routes(
    router: APIRouter,
    get_repo: Callable,
    response_model,
    not_found: str,
    serialize: Callable = lambda entity: entity,
    audit_name: str | None = None,
) -> None:
    """
    Register PUT /archive/{id}, PUT /restore/{id} and POST /{id}/toggle-archive.
    With audit_name set, each transition is written to the audit log as
    '<audit_name>Archived' / '<audit_name>Restored'.
    """

    def _audit(audits, entity, archived: bool, actor):
        if audit_name is None:
            return
        action = f"{audit_name}{'Archived' if archived else 'Restored'}"
        record_audit(
            audits,
            action,
            f"{action}: {entity.id}",
            actor,
            getattr(entity, "tenant_id", None),
        )

    @router.put("/archive/{entity_id}", response_model=response_model)
    def archive_entity(
        entity_id: str,
        repo=Depends(get_repo),
        audits=Depends(get_audit_logs),
        actor: str | None = Depends(get_actor),
    ):
        entity = get_or_404(repo, entity_id, not_found)
        repo.archive(entity, actor=actor)
        _audit(audits, entity, True, actor)
        return serialize(entity)

    @router.put("/restore/{entity_id}", response_model=response_model)
    def restore_entity(
        entity_id: str,
        repo=Depends(get_repo),
        audits=Depends(get_audit_logs),
        actor: str | None = Depends(get_actor),
    ):
        entity = get_or_404(repo, entity_id, not_found)
        repo.restore(entity, actor=actor)
        _audit(audits, entity, False, actor)
        return serialize(entity)

    @router.post("/{entity_id}/toggle-archive", response_model=response_model)
    def toggle_entity(
        entity_id: str,
        repo=Depends(get_repo),
        audits=Depends(get_audit_logs),
        actor: str | None = Depends(get_actor),
    ):
        entity = get_or_404(repo, entity_id, not_found)
        was_archived = is_archived(entity)
        repo.toggle(entity, actor=actor)
        _audit(audits, entity, not was_archived, actor)
        return serialize(entity)
