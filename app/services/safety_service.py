"""
Safety service: blocking and reporting users.

A block hides the two users from each other's discovery feeds and removes
any match between them. Reporting a user files a report for admins and
blocks the reported user on the reporter's behalf.
"""

import logging

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from app.models.block import Block
from app.models.match import Match
from app.models.profile import Profile
from app.models.report import Report

logger = logging.getLogger(__name__)


def blocked_ids(db: Session, user_id: str) -> set[str]:
    """Ids ``user_id`` blocked or was blocked by."""
    blocks = (
        db.query(Block)
        .filter(or_(Block.blocker_id == user_id, Block.blocked_id == user_id))
        .all()
    )
    return {
        block.blocked_id if block.blocker_id == user_id else block.blocker_id
        for block in blocks
    }


def block_user(db: Session, blocker: Profile, blocked: Profile) -> Block:
    """
    Block ``blocked`` for ``blocker``. Blocking twice returns the first block.

    Raises:
        ValueError: when blocking yourself.
    """
    if blocker.id == blocked.id:
        raise ValueError("Cannot block yourself")

    block = (
        db.query(Block)
        .filter(Block.blocker_id == blocker.id, Block.blocked_id == blocked.id)
        .first()
    )
    if block is None:
        block = Block(blocker_id=blocker.id, blocked_id=blocked.id)
        db.add(block)

    matches_deleted = (
        db.query(Match)
        .filter(
            or_(
                and_(Match.user1 == blocker.id, Match.user2 == blocked.id),
                and_(Match.user1 == blocked.id, Match.user2 == blocker.id),
            )
        )
        .delete(synchronize_session=False)
    )
    db.commit()
    db.refresh(block)

    logger.info("Block: %s ⊘ %s (%d match(es) removed)", blocker.id, blocked.id, matches_deleted)
    return block


def report_user(db: Session, reporter: Profile, reported: Profile, reason: str) -> Report:
    """
    File a report and block the reported user.

    Raises:
        ValueError: when reporting yourself.
    """
    if reporter.id == reported.id:
        raise ValueError("Cannot report yourself")

    report = Report(reporter_id=reporter.id, reported_user_id=reported.id, reason=reason)
    db.add(report)
    block_user(db, reporter, reported)
    db.refresh(report)

    logger.warning("Report: %s reported %s: %s", reporter.id, reported.id, reason)
    return report
