from dependency_injector import containers, providers

from payreport.config import Settings
from payreport.db.session import build_engine, build_session_factory
from payreport.lang.strings import StringManager
from payreport.reportbuilder.service import ReportService
from payreport.session.sesskey import SessionKey


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    strings = providers.Singleton(
        StringManager,
        lang=settings.provided.lang,
    )

    # Call with session_id=...
    session_key = providers.Factory(
        SessionKey,
        secret=settings.provided.secret_key,
    )

    # Call with session=... and sesskey=...
    report_service = providers.Factory(
        ReportService,
        strings=strings,
        settings=settings,
    )
