"""
命令行入口
使用 typer 和 rich 检查网络配置并输出派生参数
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config.settings import AppSettings
from .core.errors import AddressError, ErrorList, LoadError
from .core.models import NetworkConfig
from .loader import dump_network, load_network_file
from .network import (
    build_pod_cidr,
    build_service_cidr,
    default_network,
    dns_address,
    internal_api_addresses,
    validate_network,
)
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="clusternet",
    help="集群网络配置检查工具",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

logger = get_logger(__name__)

app_settings = AppSettings()


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        console.print(f"clusternet v{__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="详细输出"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从配置文件加载设置 (YAML/JSON)"
    ),
):
    """集群网络配置检查工具"""
    # 读取配置文件（若提供）并初始化全局 AppSettings
    global app_settings
    if config_file:
        try:
            file_data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            console.print(f"[red]读取配置文件失败: {escape(str(e))}[/red]")
            raise typer.Exit(1)
        if not isinstance(file_data, dict):
            console.print("[red]配置文件必须是映射[/red]")
            raise typer.Exit(1)
        app_settings = AppSettings(**file_data)
    else:
        app_settings = AppSettings()
    configure_logging(verbose or app_settings.verbose, json_output=app_settings.log_json)
    logger.debug("cli_started", verbose=verbose)


def _resolve_file(network_file: Optional[Path]) -> Path:
    path = network_file or app_settings.network_file
    if path is None:
        console.print("[red]未指定网络配置文件 (参数或 CLUSTERNET_NETWORK_FILE)[/red]")
        raise typer.Exit(1)
    return path


def _load(network_file: Optional[Path]) -> NetworkConfig:
    path = _resolve_file(network_file)
    try:
        return load_network_file(path)
    except LoadError as e:
        console.print(f"[red]读取配置文件失败: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]配置文档结构错误: {escape(str(e))}[/red]")
        raise typer.Exit(1)


# 显示函数
def display_errors(errors: ErrorList):
    """显示校验错误"""
    table = Table(title="网络配置校验失败")
    table.add_column("字段", style="cyan")
    table.add_column("类型", style="magenta")
    table.add_column("值", style="yellow")
    table.add_column("说明", style="red")

    for error in errors:
        value = "" if error.value is None else escape(str(error.value))
        table.add_row(error.path, error.type.name, value, escape(error.detail))

    console.print(table)


def display_network_info(config: NetworkConfig):
    """显示网络配置摘要"""
    table = Table(title="网络配置信息")
    table.add_column("属性", style="cyan")
    table.add_column("值", style="green")

    table.add_row("网络提供者", config.provider)
    table.add_row("Pod CIDR", config.pod_cidr)
    table.add_row("Service CIDR", config.service_cidr)
    table.add_row("集群域", config.cluster_domain)
    table.add_row("双栈", "是" if config.dual_stack.enabled else "否")
    table.add_row("kube-proxy", "禁用" if config.kube_proxy.disabled else config.kube_proxy.mode)

    console.print(table)


def _validate_or_exit(config: NetworkConfig):
    errors = validate_network(config)
    if errors:
        display_errors(errors)
        logger.error("validation_failed", error_count=len(errors))
        raise typer.Exit(1)


@app.command("defaults")
def show_defaults(
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="输出格式 (yaml/json)"
    ),
):
    """输出默认网络配置文档"""
    fmt = (output_format or app_settings.output_format).lower()
    if fmt not in ("yaml", "json"):
        raise typer.BadParameter("输出格式必须是 yaml 或 json")
    typer.echo(dump_network(default_network(), fmt))


@app.command("validate")
def validate_command(
    network_file: Optional[Path] = typer.Argument(None, help="网络配置文件 (YAML/JSON)"),
):
    """校验网络配置文件"""
    config = _load(network_file)
    display_network_info(config)
    _validate_or_exit(config)
    console.print("[green]配置验证通过 ✓[/green]")


@app.command("derive")
def derive_command(
    network_file: Optional[Path] = typer.Argument(None, help="网络配置文件 (YAML/JSON)"),
    bind_address: Optional[str] = typer.Option(
        None, "--bind-address", "-b", help="API server 监听地址，决定双栈 service CIDR 顺序"
    ),
):
    """输出派生参数：service/pod CIDR 参数、DNS 地址、API 内部地址"""
    config = _load(network_file)
    _validate_or_exit(config)

    addr = bind_address or app_settings.bind_address or ""
    try:
        dns = dns_address(config)
        api_addresses = internal_api_addresses(config)
    except AddressError as e:
        console.print(f"[red]地址计算失败: {escape(str(e))}[/red]")
        logger.error("derive_failed", error=str(e))
        raise typer.Exit(1)

    panel = Panel(
        f"""
[bold]派生参数[/bold]

• service-cluster-ip-range: {build_service_cidr(config, addr)}
• cluster-cidr: {build_pod_cidr(config)}
• cluster DNS: {dns}
• API 内部地址: {", ".join(api_addresses)}
        """.strip(),
        title="网络派生结果",
        border_style="blue"
    )
    console.print(panel)
    logger.info("derived", dns_address=dns, api_addresses=api_addresses)


# 主入口
if __name__ == "__main__":
    app()
