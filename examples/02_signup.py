"""
Sign up - Create a user and log in right away
"""
import asyncio
from authlock import (
    APIConfig,
    AsyncAuthenticationClient,
    Connections,
    CredentialAttribute,
    DatabaseInteractor,
    InputValidationError
)


async def main():
    config = APIConfig.from_env()
    
    async with AsyncAuthenticationClient(config) as auth:
        # This connection asks for a username as well
        connections = Connections().add_database('Username-Password-Authentication', requires_username=True)
        interactor = DatabaseInteractor(
            connections,
            auth,
            on_authentication=lambda credentials: print("Signed up and logged in")
        )
        
        fields = [
            (CredentialAttribute.EMAIL, "Email: "),
            (CredentialAttribute.USERNAME, "Username: "),
            (CredentialAttribute.PASSWORD, "Password: "),
        ]
        for attribute, prompt in fields:
            try:
                interactor.update(attribute, input(prompt))
            except InputValidationError as e:
                print(f"Invalid {attribute.value}: {e}")
        
        error = await interactor.create()
        if error is not None:
            print(f"Sign up failed: {error}")


if __name__ == "__main__":
    asyncio.run(main())
