"""create users, transactions and gpt tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2025-05-08 09:12:41.204113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from src.config.settings import settings


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = settings.DATABASE_SCHEMA
USERS = f"{SCHEMA}.users.id" if SCHEMA else "users.id"

CATEGORIES = (
    'SALARY', 'FREELANCE', 'INVESTMENT', 'GIFT', 'FOOD', 'GROCERIES', 'TRANSPORT',
    'TRAVEL', 'HEALTH', 'INSURANCE', 'EDUCATION', 'ENTERTAINMENT', 'UTILITIES',
    'SUBSCRIPTIONS', 'SHOPPING', 'TAXES', 'RENT', 'LOAN', 'CHARITY', 'OTHER'
)


def upgrade() -> None:
    """Upgrade schema."""
    if SCHEMA:
        op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        schema=SCHEMA
    )

    op.create_table('transactions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('subtitle', sa.String(length=150), nullable=True),
        sa.Column('category', sa.Enum(*CATEGORIES, name='transaction_category'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sa.Enum('Pending', 'Completed', 'Failed', name='transaction_status'), nullable=False),
        sa.Column('type', sa.Enum('Income', 'Expense', 'Transfer', name='transaction_type'), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], [USERS], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        schema=SCHEMA
    )

    # summary queries filter on owner and date together
    op.create_index('idx_transactions_user_id', 'transactions', ['user_id'], unique=False, schema=SCHEMA)
    op.create_index('idx_transactions_date', 'transactions', ['date'], unique=False, schema=SCHEMA)

    op.create_table('gpt',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('image', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('goal', sa.String(length=255), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('capabilities', sa.JSON(), nullable=False),
        sa.Column('limitations', sa.JSON(), nullable=False),
        sa.Column('is_public', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], [USERS], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        schema=SCHEMA
    )
    op.create_index('idx_gpt_user_id', 'gpt', ['user_id'], unique=False, schema=SCHEMA)
    op.create_index(
        'uq_gpt_user_id_name', 'gpt', ['user_id', 'name'], unique=True, schema=SCHEMA,
        postgresql_where=sa.text('deleted_at IS NULL'),
        sqlite_where=sa.text('deleted_at IS NULL')
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('uq_gpt_user_id_name', 'gpt', schema=SCHEMA)
    op.drop_index('idx_gpt_user_id', 'gpt', schema=SCHEMA)
    op.drop_table('gpt', schema=SCHEMA)

    op.drop_index('idx_transactions_date', 'transactions', schema=SCHEMA)
    op.drop_index('idx_transactions_user_id', 'transactions', schema=SCHEMA)
    op.drop_table('transactions', schema=SCHEMA)
    op.drop_table('users', schema=SCHEMA)

    # enum types outlive their tables on postgres
    sa.Enum(name='transaction_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='transaction_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='transaction_category').drop(op.get_bind(), checkfirst=True)
