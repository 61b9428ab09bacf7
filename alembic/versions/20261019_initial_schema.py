"""initial home monitor schema

Revision ID: 20261019_initial_schema
"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "device_status",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("last_seen", sa.DateTime, nullable=False),
        sa.Column("error_code", sa.Text),
        sa.Column("co2_level", sa.Float, nullable=False, server_default="0"),
        sa.Column("sound_level", sa.Float, nullable=False, server_default="0"),
        sa.Column("temperature", sa.Float, nullable=False, server_default="0"),
        sa.Column("alarm_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("alarm_active_time", sa.BigInteger, nullable=False, server_default="0"),
    )
    op.create_index("ix_device_status_last_seen", "device_status", ["last_seen"])

    op.create_table(
        "alarm_time",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("time", sa.Text, nullable=False),
        sa.Column("armed", sa.Boolean, nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "sensor_data",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("timestamp", sa.DateTime, nullable=False),
        sa.Column("co2_level", sa.Float, nullable=False),
        sa.Column("sound_level", sa.Float, nullable=False, server_default="0"),
        sa.Column("temperature", sa.Float, nullable=False, server_default="0"),
    )
    op.create_index("ix_sensor_data_timestamp", "sensor_data", ["timestamp"])

def downgrade():
    op.drop_index("ix_sensor_data_timestamp", table_name="sensor_data")
    op.drop_table("sensor_data")
    op.drop_table("alarm_time")
    op.drop_index("ix_device_status_last_seen", table_name="device_status")
    op.drop_table("device_status")
