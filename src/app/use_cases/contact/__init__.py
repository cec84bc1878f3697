from .submit_contact_message_use_case import ContactResponse, SubmitContactMessageUseCase

__all__ = ["SubmitContactMessageUseCase", "ContactResponse"]
