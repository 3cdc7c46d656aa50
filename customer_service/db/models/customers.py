from sqlalchemy import BigInteger, Column, Integer, String, Index
from .base import Base


class Customer(Base):
    __tablename__ = 'customers'
    # SQLite only autoincrements an INTEGER primary key
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(64), nullable=True)

    # Lookup only; duplicate first names are rejected by the service, not the table
    __table_args__ = (
        Index('idx_customers_first_name', 'first_name'),
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} first_name={self.first_name!r}>"
