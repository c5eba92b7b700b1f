import uvicorn

from student_records import config


def main():
    uvicorn.run(
        "student_records.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        log_level=config.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
