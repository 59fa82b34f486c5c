from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

services = Table(
    "services",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("provider_id", String(36), nullable=False),
    Column("title", String(100), nullable=False, default=""),
    Column("rate", Numeric(12, 2), nullable=False),
    Column("time_unit", String(16), nullable=False),
    Column("min_duration", Integer, nullable=False),
    Column("max_duration", Integer, nullable=False),
    Column("commission_rate", Numeric(5, 2), nullable=False),
    Column("average_rating", Float, nullable=False, default=0.0),
    Column("rating_count", Integer, nullable=False, default=0),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("updated_at", DateTime),
)

hirings = Table(
    "hirings",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("service_id", String(36), nullable=False),
    Column("client_id", String(36), nullable=False),
    Column("provider_id", String(36), nullable=False),
    Column("start_date", DateTime, nullable=False),
    Column("end_date", DateTime, nullable=False),
    Column("duration", Integer, nullable=False),
    Column("base_price", Numeric(12, 2), nullable=False),
    Column("commission_rate", Numeric(5, 2), nullable=False),
    Column("commission_amount", Numeric(12, 2), nullable=False),
    Column("total_price", Numeric(12, 2), nullable=False),
    Column("final_price", Numeric(12, 2), nullable=False),
    Column("status", String(16), nullable=False),
    Column("payment_method", String(16), nullable=False),
    Column("paid", Boolean, nullable=False, default=False),
    Column("paid_at", DateTime),
    Column("transaction_id", String(128)),
    Column("notes", String(500)),
    Column("rating_score", Integer),
    Column("rating_comment", String(500)),
    Column("rating_date", DateTime),
    Column("lock_version", Integer, nullable=False, default=0),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
    Index("ix_hirings_service_dates", "service_id", "start_date", "end_date"),
    Index("ix_hirings_client_status", "client_id", "status"),
    Index("ix_hirings_provider_status", "provider_id", "status"),
)

hiring_payments = Table(
    "hiring_payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("hiring_id", String(36), nullable=False, index=True),
    Column("position", Integer, nullable=False),
    Column("paid_at", DateTime, nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("concept", String(255), nullable=False),
    Column("receipt", String(255)),
    Column("transaction_id", String(128)),
    UniqueConstraint("hiring_id", "position", name="uq_hiring_payments_position"),
)
