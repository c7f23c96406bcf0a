from tigerclub.handlers.registration import RegistrationSession

__all__ = ["RegistrationSession"]
