import argparse

from todo_service.config import get_settings, load_config_file, setup_logger


def parse_args():
    parser = argparse.ArgumentParser(description="待办事项管理服务")
    # 支持 .env 或 YAML 配置文件
    parser.add_argument("--config", help="配置文件路径 (.env / .yml / .yaml)")
    return parser.parse_args()


# --- 入口运行逻辑 ---
if __name__ == "__main__":
    import uvicorn

    from todo_service.app import create_app

    args = parse_args()
    if args.config:
        load_config_file(args.config)

    settings = get_settings()
    setup_logger(settings.log_level, str(settings.logs_path) if settings.log_to_file else None)

    # 缺少必需配置时 create_app 直接抛出异常，进程退出
    app = create_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
