"""
Study Tracker - Grammar API
Grammar rules the user is working on
"""
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from study_tracker.api.deps import CurrentUser, DbSession
from study_tracker.models.writing import GrammarRule
from study_tracker.schemas.writing import GrammarRuleCreate, GrammarRuleResponse, GrammarRuleUpdate
from study_tracker.services.ownership import apply_updates, get_owned
from study_tracker.services.study_session import log_daily_study_session

router = APIRouter(prefix="/grammar", tags=["Grammar"])


@router.get("", response_model=list[GrammarRuleResponse])
async def list_grammar_rules(current_user: CurrentUser, db: DbSession):
    result = await db.execute(
        select(GrammarRule)
        .where(GrammarRule.user_id == current_user.id)
        .order_by(GrammarRule.created_at.desc())
    )
    return result.scalars().all()


@router.post("", response_model=GrammarRuleResponse, status_code=status.HTTP_201_CREATED)
async def create_grammar_rule(request: GrammarRuleCreate, current_user: CurrentUser, db: DbSession):
    """Add a grammar rule and log today's study session."""
    rule = GrammarRule(user_id=current_user.id, **request.model_dump())
    db.add(rule)
    await log_daily_study_session(db, current_user.id, "grammar")
    return GrammarRuleResponse.model_validate(rule)


@router.patch("/{rule_id}", response_model=GrammarRuleResponse)
async def update_grammar_rule(
    rule_id: UUID,
    request: GrammarRuleUpdate,
    current_user: CurrentUser,
    db: DbSession,
):
    rule = await get_owned(db, GrammarRule, rule_id, current_user.id, label="Grammar rule")
    apply_updates(rule, request)
    await db.flush()
    return GrammarRuleResponse.model_validate(rule)


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_grammar_rule(rule_id: UUID, current_user: CurrentUser, db: DbSession):
    rule = await get_owned(db, GrammarRule, rule_id, current_user.id, label="Grammar rule")
    await db.delete(rule)
    await db.flush()
