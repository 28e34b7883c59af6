from pydantic import BaseModel

class BufferUtilization(BaseModel):
    utilization_percent: float = 0.0
    utilization: int = 0

class BufferInfo(BaseModel):
    input: BufferUtilization = BufferUtilization()
    output: BufferUtilization = BufferUtilization()

class BuffersResponse(BaseModel):
    buffers: BufferInfo
