"""Create author and book tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('author',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment="Author's full name"),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table('book',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False, comment='Book title'),
        sa.Column('author_id', sa.Integer(), nullable=False, comment='Owning author'),
        sa.Column('published_at', sa.Date(), nullable=False, comment='Date of publication'),
        sa.ForeignKeyConstraint(['author_id'], ['author.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title', 'author_id', name='uq_book_title_author_id')
    )
    op.create_index(op.f('ix_book_title'), 'book', ['title'], unique=False)
    op.create_index(op.f('ix_book_author_id'), 'book', ['author_id'], unique=False)
    op.create_index(op.f('ix_book_published_at'), 'book', ['published_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_book_published_at'), table_name='book')
    op.drop_index(op.f('ix_book_author_id'), table_name='book')
    op.drop_index(op.f('ix_book_title'), table_name='book')
    op.drop_table('book')
    op.drop_table('author')
