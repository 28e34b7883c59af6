from pydantic import BaseModel

class ServerThroughput(BaseModel):
    throughput: int = 0
