from __future__ import annotations

import random

from flask import current_app, session
from flask.views import MethodView

from .services.participants import ParticipantStore

SESSION_KEY = "santa"


def _rng() -> random.Random:
    seed = current_app.config.get("SANTA_SEED")
    return random.Random(seed) if seed is not None else random.Random()


def load_store() -> ParticipantStore:
    """Rebuild the participant store from the signed session cookie."""
    return ParticipantStore.from_dict(
        session.get(SESSION_KEY),
        rng=_rng(),
        strategy=current_app.config["SANTA_PAIRING_STRATEGY"],
        max_attempts=current_app.config["SANTA_MAX_ATTEMPTS"],
        max_participants=current_app.config["SANTA_MAX_PARTICIPANTS"],
    )


def save_store(store: ParticipantStore) -> None:
    # Only touch the session on change so unchanged pages send no Set-Cookie
    data = store.to_dict()
    if session.get(SESSION_KEY) != data:
        session[SESSION_KEY] = data


# --------- Class-based view mixin ----------

class ParticipantStoreMixin(MethodView):
    """
    Hands each view the session's store as self.store and writes it back
    once the view returns.
    """
    store: ParticipantStore

    def dispatch_request(self, *args, **kwargs):
        self.store = load_store()
        response = super().dispatch_request(*args, **kwargs)
        save_store(self.store)
        return response
