# 数据结构（Pydantic）
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

def _check_utf8(text: Optional[str]) -> Optional[str]:
	# 孤立代理项（如 "\ud800"）能被 json 解析，但无法编码为 UTF-8 输出
	if text is not None:
		try:
			text.encode("utf-8")
		except UnicodeEncodeError:
			raise ValueError("text is not valid UTF-8")
	return text

class Post(BaseModel):
	model_config = ConfigDict(frozen=True)

	id: int
	title: str
	categories: list[str]
	content: str

class NewPostPayload(BaseModel):
	"""POST /posts 的请求体，尚未校验。缺失的字段按空值处理。"""
	title: Optional[str] = None
	categories: list[str] = Field(default_factory=list)
	content: Optional[str] = ""

	@field_validator("title", "content")
	@classmethod
	def validate_text(cls, v: Optional[str]) -> Optional[str]:
		return _check_utf8(v)

	@field_validator("categories")
	@classmethod
	def validate_categories(cls, v: list[str]) -> list[str]:
		for label in v:
			_check_utf8(label)
		return v

	def is_valid(self) -> bool:
		return bool(self.title) and len(self.categories) > 0
