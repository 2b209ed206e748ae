"""Object paths, interfaces and property names of the network service."""

# Objects (paths to them)
OBJECT_ROOT = "/xyz/openbmc_project/network"
OBJECT_CONFIG = "/xyz/openbmc_project/network/config"
OBJECT_DHCP = "/xyz/openbmc_project/network/config/dhcp"
OBJECT_SYSLOG = "/xyz/openbmc_project/logging/config/remote"

# System configuration
SYSCFG_INTERFACE = "xyz.openbmc_project.Network.SystemConfiguration"
SYSCFG_HOSTNAME = "HostName"
SYSCFG_DEFAULT_GW4 = "DefaultGateway"
SYSCFG_DEFAULT_GW6 = "DefaultGateway6"

# DHCP configuration
DHCP_INTERFACE = "xyz.openbmc_project.Network.DHCPConfiguration"
DHCP_DNS_ENABLED = "DNSEnabled"
DHCP_NTP_ENABLED = "NTPEnabled"

# MAC address
MAC_INTERFACE = "xyz.openbmc_project.Network.MACAddress"
MAC_ADDRESS = "MACAddress"

# Ethernet interface
ETH_INTERFACE = "xyz.openbmc_project.Network.EthernetInterface"
ETH_NAME = "InterfaceName"
ETH_DHCP_ENABLED = "DHCPEnabled"
ETH_DOMAIN_NAME = "DomainName"
ETH_NTP_SERVERS = "NTPServers"
ETH_NAME_SERVERS = "Nameservers"
ETH_STATIC_NAME_SERVERS = "StaticNameServers"
ETH_LINK_UP = "LinkUp"
ETH_SPEED = "Speed"

DHCP_CONF_PREFIX = "xyz.openbmc_project.Network.EthernetInterface.DHCPConf."
DHCP_CONF_BOTH = DHCP_CONF_PREFIX + "both"
DHCP_CONF_V4 = DHCP_CONF_PREFIX + "v4"
DHCP_CONF_V6 = DHCP_CONF_PREFIX + "v6"
DHCP_CONF_NONE = DHCP_CONF_PREFIX + "none"

# VLAN
VLAN_INTERFACE = "xyz.openbmc_project.Network.VLAN"
VLAN_ID = "Id"
VLAN_CREATE_INTERFACE = "xyz.openbmc_project.Network.VLAN.Create"
VLAN_CREATE_METHOD = "VLAN"

# IP addresses
IP_CREATE_INTERFACE = "xyz.openbmc_project.Network.IP.Create"
IP_CREATE_METHOD = "IP"
IP_INTERFACE = "xyz.openbmc_project.Network.IP"
IP_ADDRESS = "Address"
IP_GATEWAY = "Gateway"
IP_PREFIX = "PrefixLength"
IP4_PROTOCOL = "xyz.openbmc_project.Network.IP.Protocol.IPv4"
IP6_PROTOCOL = "xyz.openbmc_project.Network.IP.Protocol.IPv6"

# Object removal and factory reset
DELETE_INTERFACE = "xyz.openbmc_project.Object.Delete"
DELETE_METHOD = "Delete"
RESET_INTERFACE = "xyz.openbmc_project.Common.FactoryReset"
RESET_METHOD = "Reset"

# Remote syslog server
SYSLOG_INTERFACE = "xyz.openbmc_project.Network.Client"
SYSLOG_ADDRESS = "Address"
SYSLOG_PORT = "Port"

# Standard D-Bus interfaces
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"
OBJMGR_INTERFACE = "org.freedesktop.DBus.ObjectManager"


def eth_object(name: str) -> str:
    """Object path of a network interface: eth0.100 -> .../network/eth0_100"""
    return f"{OBJECT_ROOT}/{name.replace('.', '_')}"


def vlan_object(interface: str, vlan_id: int) -> str:
    """Object path of a VLAN on top of a network interface."""
    return eth_object(f"{interface}.{vlan_id}")
