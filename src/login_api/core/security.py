from login_api.schemas.user import StoredUser


def credentials_match(user: StoredUser, username: str, password: str) -> bool:
    # plain equality on both fields, nothing more
    return username == user.username and password == user.password
