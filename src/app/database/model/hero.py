"""ヒーローのデータモデルを定義するモジュール."""

from sqlalchemy import Column, Integer, Text
from sqlmodel import Field, SQLModel


class Hero(SQLModel, table=True):
    """ヒーローを表すデータベースモデル.

    Attributes
    ----------
        id: 自動採番ID(主キー)
        name: ヒーロー名(インデックス付き、重複・NULL可)

    """

    __tablename__ = "heroes"

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True, index=True),
    )
