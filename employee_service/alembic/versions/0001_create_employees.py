from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "employees",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False, unique=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("zone", sa.String(), nullable=False),
        sa.Column("services_offered", sa.JSON(), nullable=False),
        sa.Column("languages", sa.JSON(), nullable=False),
        sa.Column("experience_years", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("hourly_rate", sa.Float(), nullable=False),
        sa.Column("average_rating", sa.Float(), nullable=False, server_default="5.0"),
        sa.Column("total_reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("verification_status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
    )
    op.create_index("ix_employees_zone", "employees", ["zone"])
    op.create_index("ix_employees_verification_status", "employees", ["verification_status"])


def downgrade():
    op.drop_index("ix_employees_verification_status", table_name="employees")
    op.drop_index("ix_employees_zone", table_name="employees")
    op.drop_table("employees")
