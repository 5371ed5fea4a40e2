# File: database/models/outer_source_model.py
"""
Enrichment cache tables.

Transcriptions, interpretations and translations are properties of the
English word itself, so they are keyed by the word value and shared by every
user who has that word. Example translations belong to one user's word and
are keyed by the word id.
"""
from sqlalchemy import Column, Integer, String, Text, Date, UniqueConstraint
from database.db import Base


class TranscriptionOuterSource(Base):
    __tablename__ = "words_transcriptions_outer_source"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word_value = Column(String(255), nullable=False, index=True)
    transcription = Column(String(255), nullable=False)
    outer_source_name = Column(String(128), nullable=False)
    outer_source_url = Column(Text, nullable=True)
    recent_update_date = Column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("word_value", "transcription", "outer_source_name",
                         name="uq_transcription_outer_source"),
    )


class InterpretationOuterSource(Base):
    __tablename__ = "words_interpretations_outer_source"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word_value = Column(String(255), nullable=False, index=True)
    interpretation = Column(Text, nullable=False)
    outer_source_name = Column(String(128), nullable=False)
    outer_source_url = Column(Text, nullable=True)
    recent_update_date = Column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("word_value", "interpretation", "outer_source_name",
                         name="uq_interpretation_outer_source"),
    )


class TranslationOuterSource(Base):
    __tablename__ = "words_translations_outer_source"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word_value = Column(String(255), nullable=False, index=True)
    translation = Column(String(255), nullable=False)
    outer_source_name = Column(String(128), nullable=False)
    outer_source_url = Column(Text, nullable=True)
    recent_update_date = Column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("word_value", "translation", "outer_source_name",
                         name="uq_translation_outer_source"),
    )


class ExampleOuterSourceRow(Base):
    __tablename__ = "words_examples_outer_source"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word_id = Column(String(36), nullable=False, index=True)
    example = Column(Text, nullable=False, index=True)
    outer_source_name = Column(String(128), nullable=False)
    example_translate = Column(Text, nullable=True)
    outer_source_url = Column(Text, nullable=True)
    recent_update_date = Column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("word_id", "example", "outer_source_name",
                         name="uq_example_outer_source"),
    )
