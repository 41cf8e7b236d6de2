from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Candy Restoration"
    SALES_EMAIL: str = "sales@candyrestoration.com"
    BOOK_LINK: str = "https://calendly.com/adam-candyrestoration/15min"
    SALES_CC: str = ""  # empty = no Cc header / cc param
    EML_FILENAME: str = "Candy-Restoration-Quote.eml"

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
