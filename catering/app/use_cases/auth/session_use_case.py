from catering.app.services.session_store import ISessionStore
from catering.domain.result import Found, SessionLookup
from .dtos import SessionResponse


class GetSessionUseCase:
    """
    Look up a session by sid.

    Returns the store's tagged lookup with the snapshot narrowed to
    SessionResponse: Found(SessionResponse) | NotFound() | Fault(error).
    """

    def __init__(self, session_store: ISessionStore):
        self.session_store = session_store

    async def execute(self, sid: str) -> SessionLookup:
        lookup = await self.session_store.get_session(sid)
        if not isinstance(lookup, Found):
            return lookup

        session = lookup.value
        return Found(
            SessionResponse(
                sid=session.sid,
                owner_id=session.owner_id,
                jti=session.jti,
                valid=session.valid,
            )
        )
