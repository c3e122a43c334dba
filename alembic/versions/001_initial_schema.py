"""Initial schema: profiles, swipes, matches, admin recommendations

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enum labels are the Python member names, as SQLAlchemy's Enum stores them
ENUMS = {
    'gender': ('MALE', 'FEMALE', 'NON_BINARY', 'OTHER'),
    'interestedin': ('MALE', 'FEMALE', 'EVERYONE'),
    'matchtype': ('SOUL_MATE', 'BESTIE', 'STUDY_BUDDY', 'STANDARD'),
    'matchsource': ('MUTUAL', 'RECOMMENDATION', 'SOULMATE'),
    'recommendationtype': ('STANDARD', 'SOULMATE', 'FRIEND'),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def upgrade() -> None:
    bind = op.get_bind()
    for name, labels in ENUMS.items():
        postgresql.ENUM(*labels, name=name).create(bind, checkfirst=True)

    # Create profiles table
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('username', sa.String(50), nullable=True, unique=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('gender', _enum('gender'), nullable=False),
        sa.Column('interested_in', _enum('interestedin'), server_default='EVERYONE'),
        sa.Column('department', sa.String(50), nullable=True),
        sa.Column('major', sa.String(100), nullable=True),
        sa.Column('year', sa.String(20), nullable=True),
        sa.Column('bio', sa.Text(), server_default=''),
        sa.Column('interests', postgresql.JSONB(), server_default='[]'),
        sa.Column('primary_photo', sa.String(500), nullable=True),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    # Create swipes table
    op.create_table(
        'swipes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('swiper_id', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('swiped_id', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('liked', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('swiper_id', 'swiped_id', name='uq_swipe_pair'),
    )

    # Create matches table
    op.create_table(
        'matches',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user1', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('user2', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('compatibility_score', sa.Integer(), nullable=False),
        sa.Column('percentage', sa.Integer(), nullable=False),
        sa.Column('match_type', _enum('matchtype'), nullable=False),
        sa.Column('source', _enum('matchsource'), nullable=False),
        sa.Column('match_details', postgresql.JSONB(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    # Create admin_recommendations table
    op.create_table(
        'admin_recommendations',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('admin_id', sa.String(64), nullable=False),
        sa.Column('target_user_id', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('recommended_user_id', sa.String(64),
                  sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', _enum('recommendationtype'), server_default='STANDARD'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('admin_recommendations')
    op.drop_table('matches')
    op.drop_table('swipes')
    op.drop_table('profiles')

    # Drop enums
    for name in reversed(list(ENUMS)):
        op.execute(f'DROP TYPE IF EXISTS {name}')
