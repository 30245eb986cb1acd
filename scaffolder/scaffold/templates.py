"""Starter templates for Rust backend projects."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple


class Framework(str, Enum):
    """Frameworks with a bespoke starter template."""

    AXUM = "axum"
    ACTIX_WEB = "actix-web"

    @classmethod
    def parse(cls, identifier: str) -> Optional["Framework"]:
        """Return the matching framework, or None for unknown identifiers."""
        try:
            return cls(identifier)
        except ValueError:
            return None


class ExtraDependency(NamedTuple):
    """A crate the template needs, with optional ``--features`` value."""

    name: str
    features: Optional[str] = None


@dataclass(frozen=True)
class FrameworkSpec:
    """Main source body and extra crates for one framework."""

    identifier: str
    main_source_body: str
    extra_dependencies: Tuple[ExtraDependency, ...] = ()


MAIN_SOURCE_PATH = "src/main.rs"
MODULE_DIRECTORIES = ("services", "models", "handlers", "routes")
MODULE_PLACEHOLDER = "mod.rs"

GITIGNORE_BODY = """# Rust
/target/


# Environment
.env
.env.local
.env.*.local


"""

# serde with derive macros plus the full tokio runtime
ASYNC_WEB_DEPENDENCIES = (
    ExtraDependency("serde", "derive"),
    ExtraDependency("tokio", "full"),
)

AXUM_MAIN = """use axum::{routing::get, Router};

#[tokio::main]
async fn main() {
    let app = Router::new().route("/", get(|| async { "Hello from Axum!" }));
    let listener = tokio::net::TcpListener::bind("127.0.0.1:3000").await.unwrap();
    println!("Listening on http://127.0.0.1:3000");
    axum::serve(listener, app).await.unwrap();
}
"""

ACTIX_WEB_MAIN = """use actix_web::{get, App, HttpServer, Responder, HttpResponse};

#[get("/")]
async fn index() -> impl Responder {
    HttpResponse::Ok().body("Hello from Actix-web!")
}

#[actix_web::main]
async fn main() -> std::io::Result<()> {
    println!("Listening on http://127.0.0.1:3000");
    HttpServer::new(|| App::new().service(index))
        .bind("127.0.0.1:3000")?
        .run()
        .await
}
"""

DEFAULT_MAIN = """fn main() {
    println!("Hello, world!");
}
"""

FRAMEWORKS: Dict[Framework, FrameworkSpec] = {
    Framework.AXUM: FrameworkSpec(
        identifier=Framework.AXUM.value,
        main_source_body=AXUM_MAIN,
        extra_dependencies=ASYNC_WEB_DEPENDENCIES,
    ),
    Framework.ACTIX_WEB: FrameworkSpec(
        identifier=Framework.ACTIX_WEB.value,
        main_source_body=ACTIX_WEB_MAIN,
        extra_dependencies=ASYNC_WEB_DEPENDENCIES,
    ),
}

DEFAULT_SPEC = FrameworkSpec(identifier="default", main_source_body=DEFAULT_MAIN)


def lookup(framework_identifier: str) -> FrameworkSpec:
    """Return the template for ``framework_identifier``.

    Unknown identifiers get DEFAULT_SPEC: a hello-world body and no extra
    dependencies. Never raises.
    """
    framework = Framework.parse(framework_identifier)
    if framework is None:
        return DEFAULT_SPEC
    return FRAMEWORKS[framework]


def supported_frameworks() -> List[str]:
    """Identifiers that have a bespoke template, in declaration order."""
    return [framework.value for framework in Framework]
