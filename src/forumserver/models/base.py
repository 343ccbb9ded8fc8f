from datetime import datetime, timezone
from sqlalchemy import BigInteger, Integer

# BIGINT on PostgreSQL, plain INTEGER on SQLite so ROWID autoincrement still applies.
Id = BigInteger().with_variant(Integer(), "sqlite")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# largest value a BIGINT / SQLite INTEGER column or LIMIT/OFFSET can bind
INT64_MAX = 2**63 - 1
