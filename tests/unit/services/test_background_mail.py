import pytest
from fastapi import BackgroundTasks

from src.api.utils.background_mail import BackgroundMailGateway
from src.app.services.mail_gateway import MailDeliveryError


@pytest.mark.asyncio
async def test_reset_link_is_sent_after_response(mock_mail_gateway):
    background_tasks = BackgroundTasks()
    gateway = BackgroundMailGateway(mock_mail_gateway, background_tasks)

    await gateway.send_reset_link("user@example.com", "tok")

    mock_mail_gateway.send_reset_link.assert_not_called()
    await background_tasks()
    mock_mail_gateway.send_reset_link.assert_called_once_with("user@example.com", "tok")


@pytest.mark.asyncio
async def test_background_failure_is_logged_not_raised(mock_mail_gateway, caplog):
    mock_mail_gateway.send_reset_link.side_effect = MailDeliveryError("provider down")
    background_tasks = BackgroundTasks()
    gateway = BackgroundMailGateway(mock_mail_gateway, background_tasks)

    await gateway.send_reset_link("user@example.com", "tok")
    await background_tasks()

    assert "user@example.com" in caplog.text


@pytest.mark.asyncio
async def test_contact_message_is_sent_inline(mock_mail_gateway):
    gateway = BackgroundMailGateway(mock_mail_gateway, BackgroundTasks())

    await gateway.send_contact_message("Grace", "grace@example.com", "Hi")

    mock_mail_gateway.send_contact_message.assert_called_once_with(
        "Grace", "grace@example.com", "Hi"
    )
