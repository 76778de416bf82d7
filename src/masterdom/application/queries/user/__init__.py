from masterdom.application.queries.user.get_profile_query import GetUserDetailQuery

__all__ = ["GetUserDetailQuery"]
