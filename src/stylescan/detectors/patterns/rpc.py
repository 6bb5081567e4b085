"""gRPC and protocol buffer detection patterns."""

from stylescan.detectors.patterns import GROUP_RPC, Detector

RPC_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_RPC,
        key="grpc",
        pattern=r"io\.grpc|@GrpcService|apollo-grpc",
    ),
    Detector(
        group=GROUP_RPC,
        key="protobuf",
        pattern=r"com\.google\.protobuf|\.proto|\.pb\.java",
    ),
]
