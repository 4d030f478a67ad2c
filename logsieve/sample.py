SAMPLE_LOG = "\n".join(
    [
        "I,147,mice in the air",
        "W,149,could've been bad",
        "E,5,158,some strange error",
        "E,2,148,istereadea",
    ]
)
