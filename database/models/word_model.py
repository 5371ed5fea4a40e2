# File: database/models/word_model.py
"""
The word's own storage, modeled only as far as the enrichment cache and
its maintenance job need it. Examples live in their own table because the
orphan cleanup compares cached example origins against it.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base


class WordRow(Base):
    __tablename__ = "words"

    word_id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    value = Column(String(255), nullable=False, index=True)
    note = Column(Text, nullable=True)

    examples = relationship(
        "WordExampleRow",
        order_by="WordExampleRow.index",
        cascade="all, delete-orphan",
        back_populates="word",
    )
    transcriptions = relationship(
        "WordTranscriptionRow",
        order_by="WordTranscriptionRow.index",
        cascade="all, delete-orphan",
    )
    interpretations = relationship(
        "WordInterpretationRow",
        order_by="WordInterpretationRow.index",
        cascade="all, delete-orphan",
    )
    translations = relationship(
        "WordTranslationRow",
        order_by="WordTranslationRow.index",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "value", name="uq_word_user_value"),
    )


class WordExampleRow(Base):
    __tablename__ = "words_examples"

    word_id = Column(String(36), ForeignKey("words.word_id", ondelete="CASCADE"), primary_key=True)
    index = Column(Integer, primary_key=True)
    origin = Column(Text, nullable=False, index=True)
    translate = Column(Text, nullable=True)
    note = Column(Text, nullable=True)

    word = relationship("WordRow", back_populates="examples")


class WordTranscriptionRow(Base):
    __tablename__ = "words_transcriptions"

    word_id = Column(String(36), ForeignKey("words.word_id", ondelete="CASCADE"), primary_key=True)
    index = Column(Integer, primary_key=True)
    value = Column(String(255), nullable=False)
    note = Column(Text, nullable=True)


class WordInterpretationRow(Base):
    __tablename__ = "words_interpretations"

    word_id = Column(String(36), ForeignKey("words.word_id", ondelete="CASCADE"), primary_key=True)
    index = Column(Integer, primary_key=True)
    value = Column(Text, nullable=False)


class WordTranslationRow(Base):
    __tablename__ = "words_translations"

    word_id = Column(String(36), ForeignKey("words.word_id", ondelete="CASCADE"), primary_key=True)
    index = Column(Integer, primary_key=True)
    value = Column(String(255), nullable=False)
    note = Column(Text, nullable=True)
