from sqlalchemy import Column, String, Integer, BigInteger, DateTime, Index
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Link(Base):
    __tablename__ = "links"

    # Surrogate key; the public identifier may be reused once a row is deleted
    row_id = Column(Integer, primary_key=True, autoincrement=True)

    id = Column(BigInteger, nullable=False, index=True)
    target = Column(String(2048), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index(
            "uq_links_live_id", "id", unique=True,
            sqlite_where=deleted_at.is_(None), postgresql_where=deleted_at.is_(None),
        ),
        Index(
            "uq_links_live_target", "target", unique=True,
            sqlite_where=deleted_at.is_(None), postgresql_where=deleted_at.is_(None),
        ),
    )

    def __repr__(self):
        return f"<Link {self.id} -> {self.target}>"
