"""
Maturity model reference data.
Levels, categories, skills, models and roles are admin-managed. A skill can sit
in several categories and carries one description per level; a model groups
categories, and a role points members at one model.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base


class Level(Base):
    __tablename__ = "levels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)  # e.g. "Senior Level"
    display_order = Column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<Level {self.name}>"


class Category(Base):
    __tablename__ = "maturity_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, default=0, nullable=False)

    skill_links = relationship(
        "CategorySkill",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="CategorySkill.display_order",
    )

    @property
    def skill_ids(self):
        return [link.skill_id for link in self.skill_links]


class Skill(Base):
    __tablename__ = "maturity_skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)

    category_links = relationship("CategorySkill", back_populates="skill", cascade="all, delete-orphan")
    levels = relationship(
        "SkillLevel",
        back_populates="skill",
        cascade="all, delete-orphan",
        order_by="SkillLevel.display_order",
    )

    @property
    def category_ids(self):
        return [link.category_id for link in self.category_links]


class CategorySkill(Base):
    __tablename__ = "category_skills"
    __table_args__ = (UniqueConstraint("category_id", "skill_id", name="uq_category_skill"),)

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("maturity_categories.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("maturity_skills.id", ondelete="CASCADE"), nullable=False, index=True)
    display_order = Column(Integer, default=0, nullable=False)

    category = relationship("Category", back_populates="skill_links")
    skill = relationship("Skill", back_populates="category_links")


class SkillLevel(Base):
    """What a skill looks like at a given level."""
    __tablename__ = "skill_levels"
    __table_args__ = (UniqueConstraint("skill_id", "level_id", name="uq_skill_level"),)

    id = Column(Integer, primary_key=True, index=True)
    skill_id = Column(Integer, ForeignKey("maturity_skills.id", ondelete="CASCADE"), nullable=False, index=True)
    level_id = Column(Integer, ForeignKey("levels.id"), nullable=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, default=0, nullable=False)

    skill = relationship("Skill", back_populates="levels")
    level = relationship("Level")

    @property
    def level_name(self):
        return self.level.name if self.level else None


class MaturityModel(Base):
    """A rubric: the ordered set of categories members in a role are scored on."""
    __tablename__ = "maturity_models"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)

    category_links = relationship(
        "MaturityModelCategory",
        back_populates="maturity_model",
        cascade="all, delete-orphan",
        order_by="MaturityModelCategory.display_order",
    )
    roles = relationship("Role", back_populates="maturity_model")

    @property
    def category_ids(self):
        return [link.category_id for link in self.category_links]


class MaturityModelCategory(Base):
    __tablename__ = "maturity_model_categories"
    __table_args__ = (UniqueConstraint("maturity_model_id", "category_id", name="uq_model_category"),)

    id = Column(Integer, primary_key=True, index=True)
    maturity_model_id = Column(Integer, ForeignKey("maturity_models.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("maturity_categories.id", ondelete="CASCADE"), nullable=False)
    display_order = Column(Integer, default=0, nullable=False)

    maturity_model = relationship("MaturityModel", back_populates="category_links")
    category = relationship("Category")


class Role(Base):
    """Job role; decides which maturity model a member is assessed against."""
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    maturity_model_id = Column(Integer, ForeignKey("maturity_models.id", ondelete="SET NULL"), nullable=True)

    maturity_model = relationship("MaturityModel", back_populates="roles")

    def __repr__(self):
        return f"<Role {self.name}>"
