class NotAuthenticatedError(Exception):
    """Raised when an operation needs the caller's identity and there is none."""

    def __init__(self, action: str):
        super().__init__(f"An authenticated user is required for {action}")
        self.action = action


class NotFoundError(Exception):
    """Raised when a lookup that must return a value finds no row for the id."""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidTransitionError(Exception):
    """Raised when a submission review would leave a terminal state."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move submission from '{current}' to '{target}'")
        self.current = current
        self.target = target


def require_identity(user_id, action: str):
    if user_id is None:
        raise NotAuthenticatedError(action)
    return user_id
