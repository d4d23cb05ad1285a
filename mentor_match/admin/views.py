from sqladmin import ModelView

from mentor_match.match.models import MatchRequest
from mentor_match.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"

    # password_hash never leaves the database, not even in the admin panel.
    column_list = [
        User.id,
        User.email,
        User.name,
        User.role,
        User.created_at,
        User.updated_at,
    ]
    column_details_exclude_list = [User.password_hash]
    form_excluded_columns = [User.password_hash]
    can_create = False

    column_searchable_list = [User.email, User.name]

    column_sortable_list = [
        User.id,
        User.email,
        User.name,
        User.role,
        User.created_at,
    ]


class MatchRequestAdmin(ModelView, model=MatchRequest):
    name = "Match Request"
    name_plural = "Match Requests"

    column_list = [
        MatchRequest.id,
        MatchRequest.mentee_id,
        MatchRequest.mentor_id,
        MatchRequest.status,
        MatchRequest.created_at,
        MatchRequest.updated_at,
    ]
    can_create = False

    column_sortable_list = [
        MatchRequest.id,
        MatchRequest.status,
        MatchRequest.created_at,
        MatchRequest.updated_at,
    ]
