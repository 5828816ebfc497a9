from app.core.config import Settings


def test_defaults():
    config = Settings(_env_file=None)

    assert config.ALGORITHM == "HS256"
    assert config.ACCESS_TOKEN_EXPIRE_DAYS == 30
    assert not config.is_production


def test_is_production_is_case_insensitive():
    assert Settings(_env_file=None, ENVIRONMENT="Production").is_production
    assert not Settings(_env_file=None, ENVIRONMENT="staging").is_production


def test_cors_origins_are_split_and_trimmed():
    config = Settings(
        _env_file=None,
        BACKEND_CORS_ORIGINS="https://jobs.example.com, http://localhost:5173,,",
    )

    assert config.cors_origins == ["https://jobs.example.com", "http://localhost:5173"]


def test_environment_variables_override_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-env")
    monkeypatch.setenv("environment", "production")

    config = Settings(_env_file=None)

    assert config.SECRET_KEY == "from-env"
    assert config.is_production
