"""输入历史 - 交给readline提供上下方向键浏览"""


class InputHistory:
    """
    记录本次会话的输入
    backend 为提供 add_history() 的对象（通常是 readline 模块），
    每条输入同步过去，由它处理上下键浏览
    """

    def __init__(self, backend=None):
        self.entries = []
        self.backend = backend

    def push(self, text):
        self.entries.append(text)
        if self.backend is not None:
            self.backend.add_history(text)

    def __len__(self):
        return len(self.entries)
