# backend/student_records/main.py
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import time

from student_records import config
from student_records.client.render import render_page
from student_records.database import RecordStore
from student_records.errors import RecordError
from student_records.routers import statistics, students
from student_records.routers.statistics import compute_statistics
from student_records.routers.students import filter_students
from student_records.utils.responses import error_envelope

VERSION = "1.0.0"


def create_app(store: RecordStore | None = None) -> FastAPI:
    """Build the application. A store passed in is used as-is; otherwise
    one is loaded from config.DATA_FILE on startup."""

    # Lifespan context manager for startup/shutdown events
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if getattr(app.state, "store", None) is None:
            app.state.store = RecordStore(config.DATA_FILE)
            app.state.store.load()
        print(f"🎓 Student Management System running on http://localhost:{config.PORT}")
        print(f"📂 Data file: {app.state.store.path}")
        print(f"📊 Total students: {len(app.state.store)}")
        yield
        # Shutdown
        print("🛑 Shutting down...")

    app = FastAPI(
        title="Student Records API",
        description="Student record management over a JSON file",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        debug=config.DEBUG,
    )
    app.state.store = store

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # /api/students/ routes like /api/students
    @app.middleware("http")
    async def strip_trailing_slash(request: Request, call_next):
        path = request.scope["path"]
        if path != "/" and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    # Request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Exception handlers
    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError):
        return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope("Validation error", detail=jsonable_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "Internal server error",
                detail=str(exc) if app.debug else "An error occurred",
            ),
        )

    # Include routers
    app.include_router(students.router, prefix="/api")
    app.include_router(statistics.router, prefix="/api")

    # Health check endpoint
    @app.get("/api/health", tags=["Health"])
    async def health_check(request: Request):
        store = request.app.state.store
        return {
            "success": True,
            "status": "healthy",
            "version": VERSION,
            "students": len(store) if store is not None else 0,
            "timestamp": time.time(),
        }

    # Everything else serves the application shell
    @app.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
    async def app_shell(request: Request, full_path: str):
        store = request.app.state.store
        params = request.query_params
        filters = {key: params.get(key, "") for key in ("search", "course", "grade")}
        results = filter_students(store, **filters)
        return HTMLResponse(render_page(results, compute_statistics(store).model_dump(), filters))

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception instances that JSON can't encode
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


app = create_app()
