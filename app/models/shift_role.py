"""ShiftRole Model - Zuordnung Rolle <-> Schicht"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint

from app.database import Base


class ShiftRole(Base):
    """
    Verknüpfungstabelle (many-to-many) zwischen Schichten und Rollen.
    Jedes (shift_id, role_id) Paar existiert höchstens einmal.
    """
    __tablename__ = "shift_roles"
    __table_args__ = (
        UniqueConstraint("shift_id", "role_id", name="uq_shift_roles_shift_role"),
    )

    id = Column(Integer, primary_key=True, index=True)
    shift_id = Column(Integer, ForeignKey("shifts.id"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<ShiftRole shift={self.shift_id} role={self.role_id}>"
