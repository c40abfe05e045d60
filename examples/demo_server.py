"""Simulated server run: load the plugin, sweep, spawn, unload.

Usage:
    python -m examples.demo_server --config-dir /tmp/nofireballs --helicopters 5
"""

import argparse
import asyncio
import sys

from nofireballs import ExplosionsWithoutFireballs, LocalHost, PluginSettings, fireball_ref
from nofireballs.log import configure_logging

from .entities import spawn_flame_turret, spawn_helicopter


async def run(settings: PluginSettings, helicopters: int, turrets: int) -> None:
    host = LocalHost()
    entities = [spawn_helicopter(host) for _ in range(helicopters)]
    entities += [spawn_flame_turret(host) for _ in range(turrets)]
    # Not in the default list; must keep its fireball.
    entities.append(spawn_helicopter(host, "ch47.entity"))

    plugin = ExplosionsWithoutFireballs(settings)
    host.load_plugin(plugin)
    host.server_ready()

    if plugin.manager is not None and plugin.manager.sweep_task is not None:
        await plugin.manager.sweep_task

    entities.append(spawn_flame_turret(host))
    for entity in entities:
        ref = fireball_ref(host, entity)
        print(f"  {entity}: fireball={ref.guid if ref else None}")

    host.unload_plugin(plugin)
    print("After unload:")
    for entity in entities:
        ref = fireball_ref(host, entity)
        print(f"  {entity}: fireball={ref.guid if ref else None}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explosions Without Fireballs demo")
    parser.add_argument("--config-dir", default="config", help="Config directory")
    parser.add_argument("--interval", type=float, default=0.05, help="Sweep pause in seconds")
    parser.add_argument("--helicopters", type=int, default=3, help="Helicopters at startup")
    parser.add_argument("--turrets", type=int, default=2, help="Flame turrets at startup")

    args = parser.parse_args(argv)
    settings = PluginSettings(config_dir=args.config_dir, sweep_interval=args.interval)
    configure_logging(settings.log_level)

    asyncio.run(run(settings, args.helicopters, args.turrets))
    return 0


if __name__ == "__main__":
    sys.exit(main())
