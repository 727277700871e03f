"""Built-in CLI sub-commands for nodesty.

Each module exports a :class:`typer.Typer` sub-application that the root
app in :mod:`nodesty.app` mounts under its group name:

* :mod:`~nodesty.commands.user` -- account, services, tickets, invoices.
* :mod:`~nodesty.commands.vps` -- VPS power, backups, reinstall.
* :mod:`~nodesty.commands.dedicated` -- dedicated server power and reinstall.
* :mod:`~nodesty.commands.firewall` -- firewall rules, rDNS, attack alerts.
* :mod:`~nodesty.commands.config` -- profiles and global settings.
"""
