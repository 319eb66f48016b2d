from ._time import iso


def normalize_team(team, role=None):
    data = {
        "id": team.id,
        "name": team.name,
        "slug": team.slug,
        "avatar_url": team.avatar_url,
        "created_at": iso(team.created_at),
    }
    if role is not None:
        data["role"] = role.value
    return data


def normalize_member(member):
    return {
        "id": member.id,
        "team_id": member.team_id,
        "user_id": member.user_id,
        "user_email": member.user.email if member.user else "Unknown",
        "role": member.role.value,
        "created_at": iso(member.created_at),
    }
