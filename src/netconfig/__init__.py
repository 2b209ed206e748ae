"""Command line front end for network configuration.

Validates textual commands (addresses, MAC, DHCP, DNS/NTP, VLAN, syslog)
and forwards them to the network management service.
"""
__version__ = "1.0.0"
