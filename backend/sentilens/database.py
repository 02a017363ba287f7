"""数据库连接配置"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_session_factory(database_url: str) -> sessionmaker:
    """根据连接串创建会话工厂（SQLite 不使用连接池参数）"""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_engine(
            database_url,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
        )

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(session_factory: sessionmaker) -> None:
    """创建所有表"""
    from sentilens import models  # noqa: F401

    Base.metadata.create_all(bind=session_factory.kw["bind"])
