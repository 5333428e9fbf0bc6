"""Repository for forum user queries."""

from django.db.models import QuerySet

from alerts.models import User


class UserRepository:
    """Encapsulates the user lookups the alert pipeline needs."""

    @staticmethod
    def get_users_by_ids(user_ids: list[int]) -> QuerySet[User]:
        """Batch lookup users by their forum IDs.

        Args:
            user_ids: Forum user IDs to look up

        Returns:
            QuerySet of matching users
        """
        return User.objects.filter(uid__in=user_ids)

    @staticmethod
    def get_users_by_usernames(usernames: list[str]) -> QuerySet[User]:
        """Batch lookup users by username.

        Args:
            usernames: Usernames to look up

        Returns:
            QuerySet of matching users
        """
        return User.objects.filter(username__in=usernames)

    @staticmethod
    def get_user(uid: int) -> User | None:
        """Return the user with the given forum ID, or None."""
        return User.objects.filter(uid=uid).first()
