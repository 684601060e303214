from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, SmallInteger, String, Text

from filmlibrary.core.database import Base


class User(Base):
    __tablename__ = "users"
    username = Column(String, primary_key=True)
    password = Column(String, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)


class Actor(Base):
    __tablename__ = "actors"
    actor_id = Column(Integer, primary_key=True, autoincrement=True)
    actor_name = Column(String, nullable=False)
    gender = Column(String)
    date_of_birth = Column(Date)


class Movie(Base):
    __tablename__ = "movies"
    movie_id = Column(Integer, primary_key=True, autoincrement=True)
    movie_title = Column(String, nullable=False)
    description = Column(Text)
    release_date = Column(Date)
    rating = Column(SmallInteger)


class MovieActor(Base):
    __tablename__ = "movieactors"
    movie_id = Column(Integer, ForeignKey("movies.movie_id", ondelete="CASCADE"), primary_key=True)
    actor_id = Column(Integer, ForeignKey("actors.actor_id", ondelete="CASCADE"), primary_key=True)
