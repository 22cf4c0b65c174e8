from django.contrib.auth.hashers import BCryptPasswordHasher


class PizzaBCryptPasswordHasher(BCryptPasswordHasher):
    """Plain bcrypt with a cost factor of 10 for every principal secret."""

    rounds = 10
