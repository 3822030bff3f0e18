#!filepath: circlog/cli.py
from typing import Optional

import typer
from rich import print

from circlog import __version__
from circlog.config.app_config import AppConfig
from circlog.config.config_store import ConfigStore
from circlog.config.log_config import Granularity, RotationConfig
from circlog.rotation.controller import CircularLogger
from circlog.rotation.retention import RetentionPolicy
from circlog.utils.logger import logs

app = typer.Typer(help="Circular time-bucketed log files")


def _settings(config: Optional[str], log_dir: Optional[str]) -> AppConfig:
    settings = AppConfig.from_env()
    logs.configure(settings.diag_level, exclusive=True)
    updates = {}
    if config:
        updates["config_path"] = config
    if log_dir:
        updates["log_dir"] = log_dir
    return settings.model_copy(update=updates)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
@logs.catch(msg="log command failed")
def log(
    message: str,
    config: Optional[str] = typer.Option(None, "--config", help="配置文件路径"),
    log_dir: Optional[str] = typer.Option(None, "--log-dir", help="日志目录"),
):
    """
    写一条日志
    """
    settings = _settings(config, log_dir)
    logger = CircularLogger(settings.config_path, settings.log_dir)
    logger.log(message)
    print(f"[green]{logger.current_file}[/green]")


@app.command("show-config")
def show_config(
    config: Optional[str] = typer.Option(None, "--config"),
):
    """
    加载配置（缺失/损坏时写回默认值）并打印
    """
    settings = _settings(config, None)
    cfg = ConfigStore.load(settings.config_path)
    print(f"[blue]{settings.config_path}[/blue]")
    for key, value in cfg.to_record().items():
        print(f"  {key} = {value}")


@app.command("init-config")
def init_config(
    config: Optional[str] = typer.Option(None, "--config"),
    granularity: Granularity = typer.Option(Granularity.SECOND, "--granularity"),
    frequency: int = typer.Option(5, "--frequency", min=1),
    max_files: int = typer.Option(12, "--max-files", min=1),
):
    """
    写入一份新的配置文件（覆盖已有文件）
    """
    settings = _settings(config, None)
    cfg = RotationConfig(granularity=granularity, frequency=frequency, max_files=max_files)
    ConfigStore.save(settings.config_path, cfg)
    print(f"[green]saved {settings.config_path}[/green]")


@app.command()
def prune(
    config: Optional[str] = typer.Option(None, "--config"),
    log_dir: Optional[str] = typer.Option(None, "--log-dir"),
):
    """
    立即执行淘汰，只保留最新的 maxEntries 个日志文件
    """
    settings = _settings(config, log_dir)
    cfg = ConfigStore.load(settings.config_path)
    removed = RetentionPolicy.prune(settings.log_dir, cfg.max_files)
    if not removed:
        print("[yellow]nothing to remove[/yellow]")
        return
    for name in removed:
        print(f"[red]removed[/red] {name}")


if __name__ == "__main__":
    app()

# python -m circlog.cli log "hello"
