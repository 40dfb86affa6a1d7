"""Well-known port tables keyed by transport protocol."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class TransportProtocol(Enum):
    """Transport layer used for probing and catalog lookups."""

    TCP = "tcp"
    UDP = "udp"
    SCTP = "sctp"
    NONE = "none"

    @classmethod
    def parse(cls, value: "str | TransportProtocol | None") -> "TransportProtocol":
        """Parse a CLI/config string; empty or missing means unspecified."""
        if isinstance(value, TransportProtocol):
            return value
        name = (value or "").strip().lower()
        if not name:
            return cls.NONE
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown protocol: {value}. Use one of: {valid}") from None


_TCP_PORTS = {
    7: "echo",
    20: "ftp-data",
    21: "ftp",
    22: "ssh",
    23: "telnet",
    25: "smtp",
    37: "time",
    43: "whois",
    53: "domain",
    79: "finger",
    80: "http",
    81: "hosts2-ns",
    88: "kerberos-sec",
    106: "pop3pw",
    110: "pop3",
    111: "rpcbind",
    113: "ident",
    119: "nntp",
    135: "msrpc",
    139: "netbios-ssn",
    143: "imap",
    179: "bgp",
    199: "smux",
    389: "ldap",
    427: "svrloc",
    443: "https",
    444: "snpp",
    445: "microsoft-ds",
    465: "smtps",
    513: "login",
    514: "shell",
    515: "printer",
    543: "klogin",
    544: "kshell",
    548: "afp",
    554: "rtsp",
    587: "submission",
    631: "ipp",
    636: "ldapssl",
    646: "ldp",
    873: "rsync",
    990: "ftps",
    993: "imaps",
    995: "pop3s",
    1025: "NFS-or-IIS",
    1026: "LSA-or-nterm",
    1027: "IIS",
    1028: "unknown",
    1029: "ms-lsa",
    1110: "nfsd-status",
    1433: "ms-sql-s",
    1521: "oracle",
    1720: "h323q931",
    1723: "pptp",
    1755: "wms",
    1900: "upnp",
    2000: "cisco-sccp",
    2001: "dc",
    2049: "nfs",
    2121: "ccproxy-ftp",
    2717: "pn-requester",
    3000: "ppp",
    3128: "squid-http",
    3306: "mysql",
    3389: "ms-wbt-server",
    3986: "mapper-ws_ethd",
    4899: "radmin",
    5000: "upnp",
    5009: "airport-admin",
    5051: "ida-agent",
    5060: "sip",
    5101: "admdog",
    5190: "aol",
    5357: "wsdapi",
    5432: "postgresql",
    5631: "pcanywheredata",
    5666: "nrpe",
    5800: "vnc-http",
    5900: "vnc",
    6000: "X11",
    6001: "X11:1",
    6379: "redis",
    6646: "unknown",
    7070: "realserver",
    8000: "http-alt",
    8008: "http",
    8009: "ajp13",
    8080: "http-proxy",
    8081: "blackice-icecap",
    8443: "https-alt",
    8888: "sun-answerbook",
    9100: "jetdirect",
    9200: "wap-wsp",
    9999: "abyss",
    10000: "snet-sensor-mgmt",
    11211: "memcache",
    27017: "mongod",
    32768: "filenet-tms",
    49152: "unknown",
    49153: "unknown",
    49154: "unknown",
    49155: "unknown",
    49156: "unknown",
    49157: "unknown",
}

_UDP_PORTS = {
    7: "echo",
    9: "discard",
    17: "qotd",
    19: "chargen",
    49: "tacacs",
    53: "domain",
    67: "dhcps",
    68: "dhcpc",
    69: "tftp",
    80: "http",
    88: "kerberos-sec",
    111: "rpcbind",
    120: "cfdptkt",
    123: "ntp",
    135: "msrpc",
    136: "profile",
    137: "netbios-ns",
    138: "netbios-dgm",
    139: "netbios-ssn",
    158: "pcmail-srv",
    161: "snmp",
    162: "snmptrap",
    177: "xdmcp",
    427: "svrloc",
    443: "https",
    445: "microsoft-ds",
    497: "retrospect",
    500: "isakmp",
    514: "syslog",
    515: "printer",
    518: "ntalk",
    520: "route",
    593: "http-rpc-epmap",
    623: "asf-rmcp",
    626: "serialnumberd",
    631: "ipp",
    996: "vsinet",
    997: "maitrd",
    998: "puparp",
    999: "applix",
    1022: "exp2",
    1023: "unknown",
    1025: "blackjack",
    1026: "win-rpc",
    1027: "unknown",
    1028: "ms-lsa",
    1029: "solid-mux",
    1030: "iad1",
    1433: "ms-sql-s",
    1434: "ms-sql-m",
    1645: "radius",
    1646: "radacct",
    1701: "L2TP",
    1718: "h225gatedisc",
    1719: "h323gatestat",
    1812: "radius",
    1813: "radacct",
    1900: "upnp",
    2000: "cisco-sccp",
    2048: "dls-monitor",
    2049: "nfs",
    2222: "msantipiracy",
    2223: "rockwell-csp2",
    3283: "netassistant",
    3456: "IISrpc-or-vat",
    3703: "adobeserver-3",
    4444: "krb524",
    4500: "nat-t-ike",
    5000: "upnp",
    5060: "sip",
    5353: "zeroconf",
    5632: "pcanywherestat",
    9200: "wap-wsp",
    10000: "ndmp",
    17185: "wdbrpc",
    20031: "bakbonenetvault",
    30718: "unknown",
    31337: "BackOrifice",
    32768: "omad",
    32769: "filenet-rpc",
    32771: "sometimes-rpc6",
    32815: "unknown",
    33281: "unknown",
    49152: "unknown",
    49153: "unknown",
    49154: "unknown",
    49156: "unknown",
    49181: "unknown",
    49182: "unknown",
    49186: "unknown",
    49201: "unknown",
    65024: "unknown",
}

_SCTP_PORTS = {
    7: "echo",
    9: "discard",
    20: "ftp-data",
    21: "ftp",
    22: "ssh",
    80: "http",
    179: "bgp",
    443: "https",
    1021: "exp1",
    1022: "exp2",
    1167: "cisco-ipsla",
    1720: "h323hostcall",
    2049: "nfs",
    2225: "rcip-itu",
    2427: "mgcp-gateway",
    2904: "m2ua",
    2905: "m3ua",
    2944: "megaco-h248",
    2945: "h248-binary",
    3097: "itu-bicc-stc",
    3565: "m2pa",
    3863: "asap-sctp",
    3864: "asap-sctp-tls",
    3868: "diameter",
    4739: "ipfix",
    4740: "ipfixs",
    5060: "sip",
    5061: "sip-tls",
    5090: "car",
    5091: "cxtp",
    5672: "amqp",
    5675: "v5ua",
    6704: "frc-hp",
    6705: "frc-mp",
    6706: "frc-lp",
    7626: "simco",
    7701: "nfapi",
    8282: "unknown",
    8471: "pim-port",
    9082: "lcs-ap",
    9084: "aurora",
    9900: "iua",
    9901: "enrp-sctp",
    9902: "enrp-sctp-tls",
    14001: "sua",
    20049: "nfsrdma",
    25471: "rna",
    29118: "sgsap",
    29168: "sbcap",
    29169: "iuhsctpassoc",
    36412: "s1-control",
    36422: "x2-control",
    36443: "m2ap",
    36444: "m3ap",
    36462: "xw-control",
    38412: "ng-control",
    38422: "xn-control",
    38472: "f1-control",
}

PORT_CATALOG: Mapping[TransportProtocol, Mapping[int, str]] = MappingProxyType(
    {
        TransportProtocol.TCP: MappingProxyType(_TCP_PORTS),
        TransportProtocol.UDP: MappingProxyType(_UDP_PORTS),
        TransportProtocol.SCTP: MappingProxyType(_SCTP_PORTS),
    }
)

# Lookup order when the protocol is unspecified.
_LOOKUP_ORDER = (TransportProtocol.TCP, TransportProtocol.UDP, TransportProtocol.SCTP)


def get_most_common_ports(protocol: TransportProtocol) -> list[int]:
    """Return the common-port table for one protocol, in table order."""
    table = PORT_CATALOG.get(protocol)
    if table is None:
        return []
    return list(table)


def service_name(port: int, protocol: TransportProtocol = TransportProtocol.NONE) -> str:
    """Return the catalog service name for a port, or "" when unknown."""
    if protocol is TransportProtocol.NONE:
        for candidate in _LOOKUP_ORDER:
            name = PORT_CATALOG[candidate].get(port)
            if name:
                return name
        return ""
    return PORT_CATALOG.get(protocol, {}).get(port, "")
