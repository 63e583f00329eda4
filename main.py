"""
Main entry point for the Quote Service.
Provides command-line interface and system initialization.
"""

import asyncio
import argparse
import sys
from typing import Optional

from utils import main_logger, api_logger, config_manager, initialize_logging


class QuoteService:
    """语录服务主类"""

    def __init__(self):
        self.config = config_manager

    async def start_api_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """启动API服务器，命令行参数优先于配置文件"""
        api_config = self.config.get_api_config()

        final_host = host if host is not None else api_config.host
        final_port = port if port is not None else api_config.port

        api_logger.info(f"[Main] Starting API server on {final_host}:{final_port}...")

        import uvicorn
        from api.app import create_app
        config = uvicorn.Config(
            create_app(api_config=api_config),
            host=final_host,
            port=final_port,
            log_level="info"
        )
        server = uvicorn.Server(config)
        await server.serve()


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        description="Quote Service - 内存语录 CRUD 服务",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  python main.py serve                          # 使用配置文件中的地址启动
  python main.py serve --host 127.0.0.1 --port 8080  # 指定监听地址
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    serve_parser = subparsers.add_parser('serve', help='启动API服务器')
    serve_parser.add_argument('--host', default=None, help='监听地址 (默认取配置文件)')
    serve_parser.add_argument('--port', type=int, default=None, help='监听端口 (默认取配置文件)')

    return parser


async def main(argv=None):
    """主函数"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    initialize_logging()

    try:
        service = QuoteService()

        if args.command == 'serve':
            await service.start_api_server(host=args.host, port=args.port)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        main_logger.info("[Main] Received keyboard interrupt")
    except OSError as e:
        # 端口绑定失败等启动错误
        main_logger.error(f"[Main] Failed to start server: {e}")
        sys.exit(1)


def cli():
    """命令行入口"""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
