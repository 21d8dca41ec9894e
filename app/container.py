from dotenv import load_dotenv

load_dotenv()

from dependency_injector import containers, providers

from app.constants import IdentityConfig, RecipeConfig
from app.entitlement.policy import AdminPolicy, parse_email_list
from app.entitlement.service import EntitlementService
from app.identity.client import IdentityClient
from app.identity.service import IdentityService
from app.recipe.generator import RecipeGenerator
from app.recipe.service import RecipeService
from app.usage.repository import UsageRepository
from app.usage.service import UsageService
from app.usage.store import create_store


class Container(containers.DeclarativeContainer):
    """Contêiner de injeção de dependências"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        packages=[
            "app.recipe",
            "app.usage",
            "app.identity",
            "app.entitlement",
        ]
    )
    config = providers.Configuration()
    config.supabase.url.from_env("SUPABASE_URL")
    config.supabase.service_role_key.from_env("SUPABASE_SERVICE_ROLE_KEY")
    config.supabase.anon_key.from_env("SUPABASE_ANON_KEY")

    config.admin.emails.from_env("ADMIN_EMAILS", default="")
    config.usage.store_path.from_env("USAGE_STORE_PATH", default="")
    config.recipe.latency_seconds.from_env(
        "RECIPE_LATENCY_SECONDS", default=str(RecipeConfig.LATENCY_SECONDS), as_=float
    )

    # Identity
    identity_client = providers.Singleton(
        IdentityClient,
        base_url=config.supabase.url,
        service_role_key=config.supabase.service_role_key,
        anon_key=config.supabase.anon_key,
        timeout=IdentityConfig.TIMEOUT,
    )
    identity_service = providers.Factory(
        IdentityService,
        client=identity_client,
    )

    # Entitlement
    admin_policy = providers.Singleton(
        AdminPolicy,
        emails=providers.Callable(parse_email_list, config.admin.emails),
    )
    entitlement_service = providers.Factory(
        EntitlementService,
        client=identity_client,
        policy=admin_policy,
    )

    # Usage
    usage_store = providers.Singleton(
        create_store,
        path=config.usage.store_path,
    )
    usage_repository = providers.Factory(
        UsageRepository,
        store=usage_store,
    )
    usage_service = providers.Factory(
        UsageService,
        repository=usage_repository,
    )

    # Recipe
    recipe_generator = providers.Singleton(RecipeGenerator)
    recipe_service = providers.Factory(
        RecipeService,
        generator=recipe_generator,
        usage_service=usage_service,
        entitlement_service=entitlement_service,
        latency_seconds=config.recipe.latency_seconds,
    )


# Instância global do contêiner
container = Container()
