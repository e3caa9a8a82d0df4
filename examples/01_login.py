"""
Basic usage - Log in with email or username
"""
import asyncio
import logging
from authlock import (
    APIConfig,
    AsyncAuthenticationClient,
    Connections,
    CredentialAttribute,
    DatabaseInteractor,
    InputValidationError,
    MultifactorRequiredError,
    setup_logging
)


def on_authentication(credentials):
    print(f"Authenticated! Token type: {credentials.token_type}")


def on_complete(error):
    if error is None:
        print("Login finished")
    elif isinstance(error, MultifactorRequiredError):
        print("A second factor is required")
    else:
        print(f"Login failed: {error}")


async def main():
    logging.basicConfig()
    setup_logging(logging.INFO)
    
    # Reads AUTH0_CLIENT_ID and AUTH0_DOMAIN
    config = APIConfig.from_env()
    
    async with AsyncAuthenticationClient(config) as auth:
        connections = Connections().add_database('Username-Password-Authentication')
        interactor = DatabaseInteractor(connections, auth, on_authentication=on_authentication)
        
        try:
            interactor.update(CredentialAttribute.EMAIL_OR_USERNAME, input("Email or username: "))
            interactor.update(CredentialAttribute.PASSWORD, input("Password: "))
        except InputValidationError as e:
            print(f"Invalid {e.attribute.value}: {e}")
            return
        
        await interactor.login(on_complete)


if __name__ == "__main__":
    asyncio.run(main())
