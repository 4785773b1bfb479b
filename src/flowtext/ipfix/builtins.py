# topmark:header:start
#
#   project      : FlowText
#   file         : builtins.py
#   file_relpath : src/flowtext/ipfix/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in IANA information elements.

The subset of the IANA "IPFIX Information Elements" registry that FlowText
ships with. It seeds the process-wide information model until an extension
file replaces it.

See: https://www.iana.org/assignments/ipfix/ipfix.xhtml
"""

from __future__ import annotations

from typing import Final

# (elementId, name, abstract data type); enterprise number is 0 for all of them
IANA_ELEMENTS: Final[tuple[tuple[int, str, str], ...]] = (
    (1, "octetDeltaCount", "unsigned64"),
    (2, "packetDeltaCount", "unsigned64"),
    (3, "deltaFlowCount", "unsigned64"),
    (4, "protocolIdentifier", "unsigned8"),
    (5, "ipClassOfService", "unsigned8"),
    (6, "tcpControlBits", "unsigned16"),
    (7, "sourceTransportPort", "unsigned16"),
    (8, "sourceIPv4Address", "ipv4Address"),
    (9, "sourceIPv4PrefixLength", "unsigned8"),
    (10, "ingressInterface", "unsigned32"),
    (11, "destinationTransportPort", "unsigned16"),
    (12, "destinationIPv4Address", "ipv4Address"),
    (13, "destinationIPv4PrefixLength", "unsigned8"),
    (14, "egressInterface", "unsigned32"),
    (15, "ipNextHopIPv4Address", "ipv4Address"),
    (16, "bgpSourceAsNumber", "unsigned32"),
    (17, "bgpDestinationAsNumber", "unsigned32"),
    (18, "bgpNextHopIPv4Address", "ipv4Address"),
    (19, "postMCastPacketDeltaCount", "unsigned64"),
    (20, "postMCastOctetDeltaCount", "unsigned64"),
    (21, "flowEndSysUpTime", "unsigned32"),
    (22, "flowStartSysUpTime", "unsigned32"),
    (23, "postOctetDeltaCount", "unsigned64"),
    (24, "postPacketDeltaCount", "unsigned64"),
    (25, "minimumIpTotalLength", "unsigned64"),
    (26, "maximumIpTotalLength", "unsigned64"),
    (27, "sourceIPv6Address", "ipv6Address"),
    (28, "destinationIPv6Address", "ipv6Address"),
    (29, "sourceIPv6PrefixLength", "unsigned8"),
    (30, "destinationIPv6PrefixLength", "unsigned8"),
    (31, "flowLabelIPv6", "unsigned32"),
    (32, "icmpTypeCodeIPv4", "unsigned16"),
    (33, "igmpType", "unsigned8"),
    (34, "samplingInterval", "unsigned32"),
    (35, "samplingAlgorithm", "unsigned8"),
    (36, "flowActiveTimeout", "unsigned16"),
    (37, "flowIdleTimeout", "unsigned16"),
    (38, "engineType", "unsigned8"),
    (39, "engineId", "unsigned8"),
    (40, "exportedOctetTotalCount", "unsigned64"),
    (41, "exportedMessageTotalCount", "unsigned64"),
    (42, "exportedFlowRecordTotalCount", "unsigned64"),
    (43, "ipv4RouterSc", "ipv4Address"),
    (44, "sourceIPv4Prefix", "ipv4Address"),
    (45, "destinationIPv4Prefix", "ipv4Address"),
    (46, "mplsTopLabelType", "unsigned8"),
    (47, "mplsTopLabelIPv4Address", "ipv4Address"),
    (48, "samplerId", "unsigned8"),
    (49, "samplerMode", "unsigned8"),
    (50, "samplerRandomInterval", "unsigned32"),
    (51, "classId", "unsigned8"),
    (52, "minimumTTL", "unsigned8"),
    (53, "maximumTTL", "unsigned8"),
    (54, "fragmentIdentification", "unsigned32"),
    (55, "postIpClassOfService", "unsigned8"),
    (56, "sourceMacAddress", "macAddress"),
    (57, "postDestinationMacAddress", "macAddress"),
    (58, "vlanId", "unsigned16"),
    (59, "postVlanId", "unsigned16"),
    (60, "ipVersion", "unsigned8"),
    (61, "flowDirection", "unsigned8"),
    (62, "ipNextHopIPv6Address", "ipv6Address"),
    (63, "bgpNextHopIPv6Address", "ipv6Address"),
    (64, "ipv6ExtensionHeaders", "unsigned32"),
    (70, "mplsTopLabelStackSection", "octetArray"),
    (71, "mplsLabelStackSection2", "octetArray"),
    (72, "mplsLabelStackSection3", "octetArray"),
    (73, "mplsLabelStackSection4", "octetArray"),
    (74, "mplsLabelStackSection5", "octetArray"),
    (75, "mplsLabelStackSection6", "octetArray"),
    (76, "mplsLabelStackSection7", "octetArray"),
    (77, "mplsLabelStackSection8", "octetArray"),
    (78, "mplsLabelStackSection9", "octetArray"),
    (79, "mplsLabelStackSection10", "octetArray"),
    (80, "destinationMacAddress", "macAddress"),
    (81, "postSourceMacAddress", "macAddress"),
    (82, "interfaceName", "string"),
    (83, "interfaceDescription", "string"),
    (84, "samplerName", "string"),
    (85, "octetTotalCount", "unsigned64"),
    (86, "packetTotalCount", "unsigned64"),
    (87, "flagsAndSamplerId", "unsigned32"),
    (88, "fragmentOffset", "unsigned16"),
    (89, "forwardingStatus", "unsigned32"),
    (90, "mplsVpnRouteDistinguisher", "octetArray"),
    (91, "mplsTopLabelPrefixLength", "unsigned8"),
    (92, "srcTrafficIndex", "unsigned32"),
    (93, "dstTrafficIndex", "unsigned32"),
    (94, "applicationDescription", "string"),
    (95, "applicationId", "octetArray"),
    (96, "applicationName", "string"),
    (98, "postIpDiffServCodePoint", "unsigned8"),
    (99, "multicastReplicationFactor", "unsigned32"),
    (100, "className", "string"),
    (101, "classificationEngineId", "unsigned8"),
    (102, "layer2packetSectionOffset", "unsigned16"),
    (103, "layer2packetSectionSize", "unsigned16"),
    (104, "layer2packetSectionData", "octetArray"),
    (128, "bgpNextAdjacentAsNumber", "unsigned32"),
    (129, "bgpPrevAdjacentAsNumber", "unsigned32"),
    (130, "exporterIPv4Address", "ipv4Address"),
    (131, "exporterIPv6Address", "ipv6Address"),
    (132, "droppedOctetDeltaCount", "unsigned64"),
    (133, "droppedPacketDeltaCount", "unsigned64"),
    (134, "droppedOctetTotalCount", "unsigned64"),
    (135, "droppedPacketTotalCount", "unsigned64"),
    (136, "flowEndReason", "unsigned8"),
    (137, "commonPropertiesId", "unsigned64"),
    (138, "observationPointId", "unsigned64"),
    (139, "icmpTypeCodeIPv6", "unsigned16"),
    (140, "mplsTopLabelIPv6Address", "ipv6Address"),
    (141, "lineCardId", "unsigned32"),
    (142, "portId", "unsigned32"),
    (143, "meteringProcessId", "unsigned32"),
    (144, "exportingProcessId", "unsigned32"),
    (145, "templateId", "unsigned16"),
    (146, "wlanChannelId", "unsigned8"),
    (147, "wlanSSID", "string"),
    (148, "flowId", "unsigned64"),
    (149, "observationDomainId", "unsigned32"),
    (150, "flowStartSeconds", "dateTimeSeconds"),
    (151, "flowEndSeconds", "dateTimeSeconds"),
    (152, "flowStartMilliseconds", "dateTimeMilliseconds"),
    (153, "flowEndMilliseconds", "dateTimeMilliseconds"),
    (154, "flowStartMicroseconds", "dateTimeMicroseconds"),
    (155, "flowEndMicroseconds", "dateTimeMicroseconds"),
    (156, "flowStartNanoseconds", "dateTimeNanoseconds"),
    (157, "flowEndNanoseconds", "dateTimeNanoseconds"),
    (158, "flowStartDeltaMicroseconds", "unsigned32"),
    (159, "flowEndDeltaMicroseconds", "unsigned32"),
    (160, "systemInitTimeMilliseconds", "dateTimeMilliseconds"),
    (161, "flowDurationMilliseconds", "unsigned32"),
    (162, "flowDurationMicroseconds", "unsigned32"),
    (163, "observedFlowTotalCount", "unsigned64"),
    (164, "ignoredPacketTotalCount", "unsigned64"),
    (165, "ignoredOctetTotalCount", "unsigned64"),
    (166, "notSentFlowTotalCount", "unsigned64"),
    (167, "notSentPacketTotalCount", "unsigned64"),
    (168, "notSentOctetTotalCount", "unsigned64"),
    (169, "destinationIPv6Prefix", "ipv6Address"),
    (170, "sourceIPv6Prefix", "ipv6Address"),
    (171, "postOctetTotalCount", "unsigned64"),
    (172, "postPacketTotalCount", "unsigned64"),
    (173, "flowKeyIndicator", "unsigned64"),
    (174, "postMCastPacketTotalCount", "unsigned64"),
    (175, "postMCastOctetTotalCount", "unsigned64"),
    (176, "icmpTypeIPv4", "unsigned8"),
    (177, "icmpCodeIPv4", "unsigned8"),
    (178, "icmpTypeIPv6", "unsigned8"),
    (179, "icmpCodeIPv6", "unsigned8"),
    (180, "udpSourcePort", "unsigned16"),
    (181, "udpDestinationPort", "unsigned16"),
    (182, "tcpSourcePort", "unsigned16"),
    (183, "tcpDestinationPort", "unsigned16"),
    (184, "tcpSequenceNumber", "unsigned32"),
    (185, "tcpAcknowledgementNumber", "unsigned32"),
    (186, "tcpWindowSize", "unsigned16"),
    (187, "tcpUrgentPointer", "unsigned16"),
    (188, "tcpHeaderLength", "unsigned8"),
    (189, "ipHeaderLength", "unsigned8"),
    (190, "totalLengthIPv4", "unsigned16"),
    (191, "payloadLengthIPv6", "unsigned16"),
    (192, "ipTTL", "unsigned8"),
    (193, "nextHeaderIPv6", "unsigned8"),
    (194, "mplsPayloadLength", "unsigned32"),
    (195, "ipDiffServCodePoint", "unsigned8"),
    (196, "ipPrecedence", "unsigned8"),
    (197, "fragmentFlags", "unsigned8"),
    (198, "octetDeltaSumOfSquares", "unsigned64"),
    (199, "octetTotalSumOfSquares", "unsigned64"),
    (200, "mplsTopLabelTTL", "unsigned8"),
    (201, "mplsLabelStackLength", "unsigned32"),
    (202, "mplsLabelStackDepth", "unsigned32"),
    (203, "mplsTopLabelExp", "unsigned8"),
    (204, "ipPayloadLength", "unsigned32"),
    (205, "udpMessageLength", "unsigned16"),
    (206, "isMulticast", "unsigned8"),
    (207, "ipv4IHL", "unsigned8"),
    (208, "ipv4Options", "unsigned32"),
    (209, "tcpOptions", "unsigned64"),
    (210, "paddingOctets", "octetArray"),
    (211, "collectorIPv4Address", "ipv4Address"),
    (212, "collectorIPv6Address", "ipv6Address"),
    (213, "exportInterface", "unsigned32"),
    (214, "exportProtocolVersion", "unsigned8"),
    (215, "exportTransportProtocol", "unsigned8"),
    (216, "collectorTransportPort", "unsigned16"),
    (217, "exporterTransportPort", "unsigned16"),
    (218, "tcpSynTotalCount", "unsigned64"),
    (219, "tcpFinTotalCount", "unsigned64"),
    (220, "tcpRstTotalCount", "unsigned64"),
    (221, "tcpPshTotalCount", "unsigned64"),
    (222, "tcpAckTotalCount", "unsigned64"),
    (223, "tcpUrgTotalCount", "unsigned64"),
    (224, "ipTotalLength", "unsigned64"),
    (225, "postNATSourceIPv4Address", "ipv4Address"),
    (226, "postNATDestinationIPv4Address", "ipv4Address"),
    (227, "postNAPTSourceTransportPort", "unsigned16"),
    (228, "postNAPTDestinationTransportPort", "unsigned16"),
    (229, "natOriginatingAddressRealm", "unsigned8"),
    (230, "natEvent", "unsigned8"),
    (231, "initiatorOctets", "unsigned64"),
    (232, "responderOctets", "unsigned64"),
    (233, "firewallEvent", "unsigned8"),
    (234, "ingressVRFID", "unsigned32"),
    (235, "egressVRFID", "unsigned32"),
    (236, "VRFname", "string"),
    (237, "postMplsTopLabelExp", "unsigned8"),
    (238, "tcpWindowScale", "unsigned16"),
    (239, "biflowDirection", "unsigned8"),
    (240, "ethernetHeaderLength", "unsigned8"),
    (241, "ethernetPayloadLength", "unsigned16"),
    (242, "ethernetTotalLength", "unsigned16"),
    (243, "dot1qVlanId", "unsigned16"),
    (244, "dot1qPriority", "unsigned8"),
    (245, "dot1qCustomerVlanId", "unsigned16"),
    (246, "dot1qCustomerPriority", "unsigned8"),
    (256, "ethernetType", "unsigned16"),
    (258, "collectionTimeMilliseconds", "dateTimeMilliseconds"),
    (276, "dataRecordsReliability", "boolean"),
    (277, "observationPointType", "unsigned8"),
    (279, "connectionSumDurationSeconds", "unsigned64"),
    (281, "postNATSourceIPv6Address", "ipv6Address"),
    (282, "postNATDestinationIPv6Address", "ipv6Address"),
    (298, "initiatorPackets", "unsigned64"),
    (299, "responderPackets", "unsigned64"),
    (300, "observationDomainName", "string"),
    (313, "ipHeaderPacketSection", "octetArray"),
    (314, "ipPayloadPacketSection", "octetArray"),
    (322, "observationTimeSeconds", "dateTimeSeconds"),
    (323, "observationTimeMilliseconds", "dateTimeMilliseconds"),
    (324, "observationTimeMicroseconds", "dateTimeMicroseconds"),
    (325, "observationTimeNanoseconds", "dateTimeNanoseconds"),
    (352, "layer2OctetDeltaCount", "unsigned64"),
    (353, "layer2OctetTotalCount", "unsigned64"),
)
