from sqlalchemy import Column, ForeignKey, Integer, Text, UniqueConstraint, text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


class Sections(Base):
    __tablename__ = 'sections'

    name = Column(Text, nullable=False, unique=True)
    id = Column(Integer, primary_key=True)
    description = Column(Text)
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    section_schedules = relationship('SectionSchedules', back_populates='section')
    appointments = relationship('Appointments', back_populates='section')


class SectionSchedules(Base):
    __tablename__ = 'section_schedules'
    __table_args__ = (
        UniqueConstraint('section_id', 'location'),
    )

    section_id = Column(ForeignKey('sections.id', ondelete='CASCADE'), nullable=False, index=True)
    location = Column(Text, nullable=False, index=True)
    schedule = Column(Text, nullable=False, server_default=text("'{}'"))
    slot_interval = Column(Integer, nullable=False, server_default=text('15'))
    id = Column(Integer, primary_key=True)
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    section = relationship('Sections', back_populates='section_schedules')


class LocationSchedules(Base):
    __tablename__ = 'location_schedules'

    location = Column(Text, nullable=False, unique=True)
    schedule = Column(Text, nullable=False, server_default=text("'{}'"))
    id = Column(Integer, primary_key=True)
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))


class Appointments(Base):
    __tablename__ = 'appointments'

    location = Column(Text, nullable=False, index=True)
    date = Column(Text, nullable=False)
    day = Column(Text, nullable=False)
    time = Column(Text, nullable=False)
    patient_name = Column(Text, nullable=False)
    test_type = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    is_confirmed = Column(Integer, nullable=False, server_default=text('0'))
    is_default = Column(Integer, nullable=False, server_default=text('0'))
    id = Column(Integer, primary_key=True)
    doctor_name = Column(Text, nullable=False, server_default=text("''"))
    notes = Column(Text, nullable=False, server_default=text("''"))
    section_id = Column(ForeignKey('sections.id', ondelete='SET NULL'), index=True)
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    section = relationship('Sections', back_populates='appointments')
