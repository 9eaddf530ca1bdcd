from presentation.controllers.signup import SignUpController

__all__ = ["SignUpController"]
