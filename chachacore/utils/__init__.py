from .random_gen import SecureRandom

__all__ = ["SecureRandom"]
